"""
Presentation package.

One presenter per transport turns a BoundaryErrorDto into that
transport's payload. Presenters translate messages and attach the
status chosen by the transport policy; they never decide anything else.
"""
