"""Structural validation of submitted transaction records.

The JSON Schema is generated once from the TransactionRecord model, so the
typed record and the wire-level schema always agree. Validation collects
every violation instead of stopping at the first one, and never raises for
non-conforming input: lists, scalars and null all produce a report.

Format checks go through a jsonschema FormatChecker. ipv4 uses the stock
check, date-time relies on rfc3339-validator being installed, and email is
checked with email-validator (the stock check only looks for an "@").
"""

import logging
from typing import Any

from email_validator import EmailNotValidError, validate_email
from jsonschema import Draft202012Validator, FormatChecker
from jsonschema.exceptions import ValidationError

from finrecord.models import TransactionRecord, ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)

TRANSACTION_SCHEMA = TransactionRecord.model_json_schema(by_alias=True)

format_checker = FormatChecker()


@format_checker.checks("email", raises=EmailNotValidError)
def is_email(instance: Any) -> bool:
    """Syntax-only email check; no DNS lookups."""
    if not isinstance(instance, str):
        return True
    validate_email(instance, check_deliverability=False)
    return True


Draft202012Validator.check_schema(TRANSACTION_SCHEMA)
_validator = Draft202012Validator(TRANSACTION_SCHEMA, format_checker=format_checker)


def _format_path(error: ValidationError) -> str:
    """Render the error's instance path as ``a.b.0.c`` ("$" for the root)."""
    parts = [str(p) for p in error.absolute_path]
    return ".".join(parts) if parts else "$"


def validate_record(data: Any) -> ValidationReport:
    """Check a parsed JSON value against the transaction schema.

    Returns a report with valid=True and no issues, or valid=False and the
    issues ordered by path, then message.
    """
    issues = [
        ValidationIssue(
            path=_format_path(error),
            message=error.message,
            validator=str(error.validator),
        )
        for error in _validator.iter_errors(data)
    ]
    issues.sort(key=lambda issue: (issue.path, issue.message))

    if issues:
        logger.info(f"Record failed validation with {len(issues)} issue(s)")
    return ValidationReport(valid=not issues, issues=issues)
