"""Core domain types and logic."""

from .config import Config, ConfigError, configure, current_config, load_config
from .error import DiagnosticError, errorf, new_error, wrap, wrap_prefix
from .errorset import ErrorSet, add, add_to, new_set
from .factory import FormattedFactory, new_factory
from .failure import Category, MessageFailure
from .identity import same_origin
from .predicates import apply_predicate, is_exist, is_not_exist, is_permission
from .recover import panic_error, recover
from .result import Err, Ok, Result
from .sink import ConsoleSink, LogSink, set_sink
from .stack import CapturedStack, StackFrame, capture

__all__ = [
    # config
    "Config",
    "ConfigError",
    "configure",
    "current_config",
    "load_config",
    # error
    "DiagnosticError",
    "errorf",
    "new_error",
    "wrap",
    "wrap_prefix",
    # errorset
    "ErrorSet",
    "add",
    "add_to",
    "new_set",
    # factory
    "FormattedFactory",
    "new_factory",
    # failure
    "Category",
    "MessageFailure",
    # identity
    "same_origin",
    # predicates
    "apply_predicate",
    "is_exist",
    "is_not_exist",
    "is_permission",
    # recover
    "panic_error",
    "recover",
    # result
    "Err",
    "Ok",
    "Result",
    # sink
    "ConsoleSink",
    "LogSink",
    "set_sink",
    # stack
    "CapturedStack",
    "StackFrame",
    "capture",
]
