"""
Custom Exception Classes
Package-specific exceptions raised by the container and the view pipeline
"""
from typing import Optional


class BladeException(Exception):
    """Base exception for all bladeview exceptions"""
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.__class__.message
        super().__init__(self.message)


class ContainerException(BladeException):
    """
    Container misuse exception

    Raised when a binding is replaced after it has been resolved

    Example:
        raise ContainerException("Binding 'view' is already resolved")
    """
    message = "Container error"


class BindingNotFoundException(ContainerException):
    """
    Binding not found exception

    Raised when resolving a key that was never bound

    Example:
        raise BindingNotFoundException("Binding 'mailer' not found in container")
    """
    message = "Binding not found"

    def __init__(self, message: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ConfigKeyNotFoundException(BladeException):
    """
    Config key not found exception

    Raised when a dotted key is missing from the config Repository
    """
    message = "Config key not found"

    def __init__(self, message: Optional[str] = None, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class ViewNotFoundException(BladeException):
    """
    View not found exception

    Raised when the finder exhausted every candidate path or namespace hint

    Example:
        raise ViewNotFoundException("View [welcome] not found.")
    """
    message = "View not found"


class EngineNotFoundException(BladeException):
    """
    Engine not found exception

    Raised when an engine name (or a file extension) has no registered engine
    """
    message = "Engine not found"


class CompileException(BladeException):
    """
    Template compile exception

    Raised when directive expansion fails. Carries the offending directive
    name and, where available, the line in the template source.

    Example:
        raise CompileException("Unexpected @endif", directive='endif', line=12)
    """
    message = "Template compilation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        directive: Optional[str] = None,
        line: Optional[int] = None,
        path: Optional[str] = None
    ):
        self.directive = directive
        self.line = line
        self.path = path
        super().__init__(message)

    def __str__(self):
        details = []
        if self.directive:
            details.append(f"@{self.directive}")
        if self.line is not None:
            details.append(f"line {self.line}")
        if self.path:
            details.append(self.path)
        if details:
            return f"{self.message} ({', '.join(details)})"
        return self.message


class ViewException(BladeException):
    """
    View render exception

    Raised when template code fails while rendering. The original exception
    is chained as __cause__.
    """
    message = "Error rendering view"

    def __init__(self, message: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
