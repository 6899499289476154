"""
User bounded context, domain layer.

Account lookup and registration rules, and the error codes they raise.
"""
