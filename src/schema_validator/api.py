"""Public API for schema_validator package.

validate() is the single entry point: it runs every proposed schema file
through parse -> resolve mode -> fetch history -> check -> aggregate and
folds the subject outcomes into one RunOutcome. A failure in one subject
never stops the batch.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Union

from schema_validator.codes import ValidationCode
from schema_validator.config import ValidatorSettings
from schema_validator.contracts import RunOutcome, SubjectOutcome
from schema_validator.errors import InvalidModeError, ParseError
from schema_validator.kernel.aggregate import fold_run, hard_error_outcome, subject_outcome
from schema_validator.kernel.checker import CompatibilityOracle, check_compatibility
from schema_validator.kernel.history import Failed, NotRegistered, RegistryReader, fetch_history
from schema_validator.kernel.modes import CompatibilityMode, resolve_mode
from schema_validator.kernel.selection import RegisteredVersion
from schema_validator.kernel.subject import derive_subject
from schema_validator._internal.avro import AvroCompatibilityOracle, AvroSchemaParser
from schema_validator._internal.discovery import discover_schema_files
from schema_validator._internal.io.registry import RegistryClient

logger = logging.getLogger(__name__)

PathInput = Union[str, os.PathLike, Path]


class SchemaParser(Protocol):
    """Turns schema text into a schema object and reads its declared mode."""

    def parse(self, raw_text: str): ...

    def extract_mode(self, raw_text: str): ...


def _note(code: ValidationCode, message: str) -> str:
    return f"{code.value}: {message}"


def _validate_one(
    path: PathInput,
    registry: RegistryReader,
    oracle: CompatibilityOracle,
    parser: SchemaParser,
) -> SubjectOutcome:
    path_str = str(path)
    try:
        subject = derive_subject(path)
    except ValueError as e:
        return hard_error_outcome(path_str, path_str, ValidationCode.READ_ERROR, str(e))

    logger.debug("Checking %s as subject %s", path_str, subject)
    try:
        raw_text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return hard_error_outcome(subject, path_str, ValidationCode.READ_ERROR, f"Failed to read {path_str}: {e}")

    try:
        proposed = parser.parse(raw_text)
        declared = parser.extract_mode(raw_text)
    except ParseError as e:
        return hard_error_outcome(
            subject, path_str, ValidationCode.PARSE_ERROR,
            f"Failed to parse proposed schema {path_str}. Is it valid Avro? {e}",
        )

    try:
        mode = resolve_mode(declared)
    except InvalidModeError as e:
        return hard_error_outcome(
            subject, path_str, ValidationCode.INVALID_MODE,
            f"{e} (proposed schema at {path_str})", mode=str(declared),
        )

    if mode is None:
        return subject_outcome(subject, path_str, [], notes=[_note(
            ValidationCode.NO_POLICY,
            "No compatibility mode declared; compatibility check skipped",
        )])
    if mode is CompatibilityMode.NONE:
        return subject_outcome(subject, path_str, [], mode=mode.value, notes=[_note(
            ValidationCode.MODE_NONE,
            f"Desired compatibility for subject {subject} is set to 'none'; compatibility check skipped",
        )])

    history_result = fetch_history(registry, subject, latest_only=not mode.transitive)
    if isinstance(history_result, Failed):
        return hard_error_outcome(
            subject, path_str, ValidationCode.FETCH_ERROR,
            f"Failed to fetch registered versions of subject {subject}: {history_result.cause}",
            mode=mode.value,
        )

    notes: List[str] = []
    history: List[RegisteredVersion] = []
    if isinstance(history_result, NotRegistered) or not history_result.schemas:
        notes.append(_note(
            ValidationCode.NEW_SUBJECT,
            f"No previous versions found for subject {subject}; nothing to check against",
        ))
    else:
        for version, text in history_result.schemas:
            try:
                history.append(RegisteredVersion(version=version, schema=parser.parse(text)))
            except ParseError as e:
                return hard_error_outcome(
                    subject, path_str, ValidationCode.PARSE_ERROR,
                    f"Registered version {version} of subject {subject} could not be parsed: {e}",
                    mode=mode.value,
                )

    try:
        verdicts = check_compatibility(mode, proposed, history, oracle)
    except ParseError as e:
        return hard_error_outcome(
            subject, path_str, ValidationCode.PARSE_ERROR,
            f"Compatibility check for subject {subject} could not run: {e}",
            mode=mode.value,
        )
    return subject_outcome(subject, path_str, verdicts, mode=mode.value, notes=notes)


def _validate_isolated(
    path: PathInput,
    registry: RegistryReader,
    oracle: CompatibilityOracle,
    parser: SchemaParser,
) -> SubjectOutcome:
    try:
        outcome = _validate_one(path, registry, oracle, parser)
    except Exception as e:
        # Unexpected collaborator failure: isolate it to this subject
        logger.exception("Unexpected error while validating %s", path)
        path_str = str(path)
        try:
            subject = derive_subject(path)
        except ValueError:
            subject = path_str
        return hard_error_outcome(
            subject, path_str, ValidationCode.INTERNAL_ERROR, f"Unexpected error: {e!r}"
        )
    if outcome.error is not None:
        logger.warning("Subject %s failed: %s", outcome.subject, outcome.error.message)
    return outcome


def validate(
    schema_paths: Iterable[PathInput],
    registry: RegistryReader,
    oracle: Optional[CompatibilityOracle] = None,
    parser: Optional[SchemaParser] = None,
    max_workers: int = 1,
) -> RunOutcome:
    """
    Validate proposed schema files against their registered history.

    Args:
        schema_paths: Proposed schema files, in reporting order
        registry: Registry read client (list_versions / get_schema)
        oracle: Compatibility oracle (defaults to Avro resolution)
        parser: Schema text parser (defaults to Avro)
        max_workers: Upper bound on subjects checked concurrently

    Returns:
        RunOutcome with one SubjectOutcome per path, in input order
    """
    if max_workers < 1:
        raise ValueError(f"max_workers must be at least 1, got {max_workers}")
    oracle = oracle or AvroCompatibilityOracle()
    parser = parser or AvroSchemaParser()
    paths = list(schema_paths)

    if max_workers == 1 or len(paths) <= 1:
        outcomes = [_validate_isolated(path, registry, oracle, parser) for path in paths]
    else:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            outcomes = list(executor.map(
                lambda path: _validate_isolated(path, registry, oracle, parser), paths
            ))
    return fold_run(outcomes)


def validate_schema_dir(schema_dir: PathInput, settings: ValidatorSettings) -> RunOutcome:
    """Discover schema files under `schema_dir` and validate them against the configured registry."""
    if settings.registry_url is None:
        raise ValueError("A registry URL is required")
    paths = discover_schema_files(schema_dir, settings.extensions)
    logger.info("Found %d proposed schema file(s) under %s", len(paths), schema_dir)
    with RegistryClient(
        settings.registry_url,
        timeout=settings.timeout_seconds,
        auth=settings.auth,
    ) as registry:
        return validate(paths, registry, max_workers=settings.max_workers)
