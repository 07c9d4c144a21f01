"""Custom exceptions for the ergonomics risk engine"""


class ErgoRiskError(Exception):
    """Base exception for ergonomics risk engine errors"""
    pass


class InvalidAssessmentError(ErgoRiskError):
    """Raised when assessment or profile data fails validation at the boundary"""
    pass


class ConfigurationError(ErgoRiskError):
    """Raised when a scoring table or template catalogue is incomplete"""
    pass


class GeneratorError(ErgoRiskError):
    """Raised when an external recommendation generator fails"""
    pass


class GeneratorResponseError(GeneratorError):
    """Raised when a generator payload is malformed or does not match the schema"""
    pass
