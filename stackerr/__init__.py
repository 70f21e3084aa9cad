"""Errors with stack traces, comparable formatted errors, and error sets.

    import stackerr

    Crashed = stackerr.new_factory("oh %s")

    def crash(s: str) -> stackerr.DiagnosticError:
        return Crashed(s)

    errs = stackerr.add_to(crash("dear"), crash("my"))
    if errs and stackerr.same_origin(errs, Crashed):
        print(errs)
"""

from .core import (
    CapturedStack,
    Category,
    Config,
    ConfigError,
    ConsoleSink,
    DiagnosticError,
    Err,
    ErrorSet,
    FormattedFactory,
    LogSink,
    MessageFailure,
    Ok,
    Result,
    StackFrame,
    add,
    add_to,
    apply_predicate,
    capture,
    configure,
    current_config,
    errorf,
    is_exist,
    is_not_exist,
    is_permission,
    load_config,
    new_error,
    new_factory,
    new_set,
    panic_error,
    recover,
    same_origin,
    set_sink,
    wrap,
    wrap_prefix,
)

__version__ = "0.1.0"

__all__ = [
    "CapturedStack",
    "Category",
    "Config",
    "ConfigError",
    "ConsoleSink",
    "DiagnosticError",
    "Err",
    "ErrorSet",
    "FormattedFactory",
    "LogSink",
    "MessageFailure",
    "Ok",
    "Result",
    "StackFrame",
    "__version__",
    "add",
    "add_to",
    "apply_predicate",
    "capture",
    "configure",
    "current_config",
    "errorf",
    "is_exist",
    "is_not_exist",
    "is_permission",
    "load_config",
    "new_error",
    "new_factory",
    "new_set",
    "panic_error",
    "recover",
    "same_origin",
    "set_sink",
    "wrap",
    "wrap_prefix",
]
