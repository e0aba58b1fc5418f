from .config import ValidatorConfig
from .models import ArchivalPath, UnitIdentity, ValidationOutcome, ValidationResult, Violation, ViolationKind
from .natural import natural_key, natural_sorted
from .patterns import LevelRule, compose_rules
from .policy import AbortOnFirst, CollectAndContinue, build_policy
from .validator import FundValidator

__all__ = [
    "ValidatorConfig",
    "ArchivalPath",
    "UnitIdentity",
    "ValidationOutcome",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "natural_key",
    "natural_sorted",
    "LevelRule",
    "compose_rules",
    "AbortOnFirst",
    "CollectAndContinue",
    "build_policy",
    "FundValidator",
]
__version__ = "0.1.0"
