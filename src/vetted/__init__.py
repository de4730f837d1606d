"""vetted — validate request parameters, collect per-field messages.

Basic usage::

    from vetted import Validator
    from vetted.rules import required, email, int_val

    validator = Validator().validate(params, {
        "email": required & email,
        "age": {"rules": required & int_val, "messages": {"required": "Age is mandatory"}},
    })

    if not validator.is_valid:
        return validator.get_errors()   # {"age": ["Age is mandatory"]}

Messages fall back to the rule identifier (``"required"``) unless
overridden per parameter, per call, or app-wide through
``ValidatorConfig(messages=...)``.
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "FieldRules",
    "MissingRulesError",
    "Params",
    "RuleSet",
    "RuleViolation",
    "ValidationResult",
    "Validator",
    "ValidatorConfig",
    "VettedError",
    "validate",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import vetted`` fast while providing a clean top-level API.
    """
    if name in ("Validator", "FieldRules", "validate"):
        from vetted import validator as _validator

        return getattr(_validator, name)

    if name == "ValidatorConfig":
        from vetted.config import ValidatorConfig

        return ValidatorConfig

    if name == "ValidationResult":
        from vetted.result import ValidationResult

        return ValidationResult

    if name == "RuleSet":
        from vetted.rules import RuleSet

        return RuleSet

    if name == "Params":
        from vetted.http.params import Params

        return Params

    if name in ("VettedError", "ConfigurationError", "MissingRulesError", "RuleViolation"):
        from vetted import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
