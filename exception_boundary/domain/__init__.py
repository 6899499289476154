"""
Domain layer package.

Contains pure business rules: error codes, semantic exceptions, guards,
entities, port interfaces and the transport policy each context owns
for its own codes. No IO, no side effects.
"""
