"""
Report-type formatting rules.

A report-type tag is matched against every rule in ``REPORT_RULES`` by
case-insensitive substring, and every matching rule contributes, in
declaration order. Each rule names the column concepts it cares about; a
concept's column is located from the header text and the whole data-row span
of that column gets the concept's formatter. Missing columns are skipped.

Formatting is planned first (a list of ``FormatInstruction``) and applied in
one pass, so the assembler can build every sheet before touching styles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from loguru import logger
from openpyxl.worksheet.worksheet import Worksheet

from report_engine.components.addressing import column_range
from report_engine.components.detector import NOT_FOUND, find_column
from report_engine.components.formatters import (
    format_currency,
    format_date,
    format_number,
    format_percentage,
)

Formatter = Callable[[Worksheet, str], int]


@dataclass(frozen=True)
class ColumnConcept:
    name: str
    keywords: Tuple[str, ...]
    formatter: Formatter


@dataclass(frozen=True)
class FormattingRule:
    name: str
    triggers: Tuple[str, ...]
    concepts: Tuple[ColumnConcept, ...]

    def matches(self, report_type: str) -> bool:
        tag = report_type.lower()
        return any(trigger in tag for trigger in self.triggers)


@dataclass(frozen=True)
class FormatInstruction:
    rule: str
    concept: str
    column: int
    cell_range: str
    formatter: Formatter

    def apply(self, ws: Worksheet) -> int:
        return self.formatter(ws, self.cell_range)


REPORT_RULES: Tuple[FormattingRule, ...] = (
    FormattingRule(
        "financial",
        ("financial",),
        (
            ColumnConcept("revenue", ("revenue", "income", "sales"), format_currency),
            ColumnConcept("expense", ("expense", "cost"), format_currency),
            ColumnConcept("profit", ("profit", "net income", "margin"), format_currency),
        ),
    ),
    FormattingRule(
        "ar-aging",
        ("ar", "aging"),
        (
            ColumnConcept("amount", ("amount", "balance", "total"), format_currency),
            ColumnConcept("date", ("date", "due date", "invoice date"), format_date),
        ),
    ),
    FormattingRule(
        "client-profitability",
        ("profitability", "client"),
        (
            ColumnConcept("revenue", ("revenue", "billing", "fees"), format_currency),
            ColumnConcept("cost", ("cost", "expense"), format_currency),
            ColumnConcept("margin", ("margin", "profit %", "profitability"), format_percentage),
        ),
    ),
    FormattingRule(
        "time-billing",
        ("time", "billing"),
        (
            ColumnConcept("hours", ("hours", "time", "billable hours"), format_number),
            ColumnConcept("rate", ("rate", "hourly rate"), format_currency),
            ColumnConcept("amount", ("amount", "total", "billing"), format_currency),
            ColumnConcept("utilization", ("utilization", "efficiency", "%"), format_percentage),
        ),
    ),
    FormattingRule(
        "project-status",
        ("project", "status"),
        (
            ColumnConcept("progress", ("progress", "complete", "%"), format_percentage),
            ColumnConcept("budget", ("budget", "estimate"), format_currency),
            ColumnConcept("actual", ("actual", "spent"), format_currency),
            ColumnConcept("date", ("date", "due date", "deadline"), format_date),
        ),
    ),
)


def matching_rules(report_type: str, rules: Sequence[FormattingRule] = REPORT_RULES) -> List[FormattingRule]:
    return [rule for rule in rules if rule.matches(report_type)]


def plan_formatting(
    report_type: str,
    headers: Sequence[str],
    last_row: int,
    rules: Sequence[FormattingRule] = REPORT_RULES,
) -> List[FormatInstruction]:
    """Format instructions for one sheet; ``last_row`` is the zero-based last row."""
    if last_row < 1:
        return []
    plan: List[FormatInstruction] = []
    for rule in matching_rules(report_type, rules):
        for concept in rule.concepts:
            col = find_column(headers, concept.keywords)
            if col == NOT_FOUND:
                logger.debug("Rule {}: no column for {}", rule.name, concept.name)
                continue
            plan.append(
                FormatInstruction(
                    rule=rule.name,
                    concept=concept.name,
                    column=col,
                    cell_range=column_range(col, 1, last_row),
                    formatter=concept.formatter,
                )
            )
    return plan


def apply_plan(ws: Worksheet, plan: Sequence[FormatInstruction]) -> int:
    return sum(instruction.apply(ws) for instruction in plan)


def apply_report_type_formatting(ws: Worksheet, report_type: str, headers: Sequence[str]) -> List[FormatInstruction]:
    plan = plan_formatting(report_type, headers, ws.max_row - 1)
    apply_plan(ws, plan)
    return plan
