# core/errors.py

class DomainError(ValueError):
    """
    Raised when a scene object is built from parameters outside its domain,
    for example a transform that scales an axis by zero.
    """
