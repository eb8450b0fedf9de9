from .calculator import (
    AccountingResult,
    BatchReport,
    MaxEmissionEntry,
    TotalEntry,
    max_emission_per_day,
    process_document,
    run_accounting,
    run_from_config,
)
from .documents import GeneratorKind, GeneratorRecord
from .errors import GenerationAccountingError, ReferenceDataMissingError, StructuralMissingError
from .parsing import parse_number
from .processors import compute_generator_outcome
from .reference_data import ReferenceFactors, load_reference_data
from .settings import AccountingConfig, load_config

__all__ = [
    "AccountingConfig",
    "AccountingResult",
    "BatchReport",
    "GenerationAccountingError",
    "GeneratorKind",
    "GeneratorRecord",
    "MaxEmissionEntry",
    "ReferenceDataMissingError",
    "ReferenceFactors",
    "StructuralMissingError",
    "TotalEntry",
    "compute_generator_outcome",
    "load_config",
    "load_reference_data",
    "max_emission_per_day",
    "parse_number",
    "process_document",
    "run_accounting",
    "run_from_config",
]
