"""Admission checks run on an uploaded add-on before it is stored."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from addonpack.tree.models import DirNode
from addonpack.validation.duplicates import (
    check_case_insensitive_duplicates,
    check_names_legal,
)
from addonpack.validation.names import is_legal_addon_name

logger = logging.getLogger(__name__)


class AdmissionReport(BaseModel):
    """Result of checking one add-on upload."""

    addon_name: str = ""
    valid: bool = True
    illegal_names: list[str] = Field(default_factory=list)
    case_duplicates: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


def check_addon(addon_name: str, tree: DirNode) -> AdmissionReport:
    """Run every name check over *tree* and collect all problems.

    The add-on name, illegal path components and case-insensitive clashes
    are checked independently so the uploader sees everything at once.
    """
    report = AdmissionReport(addon_name=addon_name)

    if not is_legal_addon_name(addon_name):
        report.errors.append(f"Invalid add-on name: {addon_name!r}")

    if not check_names_legal(tree, report.illegal_names):
        report.errors.append(
            "Add-on contains files or directories with illegal names: "
            + ", ".join(report.illegal_names)
        )

    if not check_case_insensitive_duplicates(tree, report.case_duplicates):
        report.errors.append(
            "Add-on contains names that differ only in case: "
            + ", ".join(report.case_duplicates)
        )

    if report.errors:
        report.valid = False
        for message in report.errors:
            logger.warning("%s: %s", addon_name, message)

    return report
