"""
export.py

Quote export: flattens the selection and its breakdown into labelled
rows, then into a fully-quoted CSV download. Also builds the summary
table shown on screen and a PDF rendition of the same summary.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from io import BytesIO
from typing import List, Optional, Tuple

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from training_quote.constants import (
    ADMIN_PERCENTAGE,
    APP_TITLE,
    DURATION_LABELS,
    LOCATION_LABELS,
    PM_RATE,
    ROLE_LABELS,
    TRAINING_TYPE_LABELS,
    TRAVEL_COSTING_LABELS,
    TravelCosting,
)
from training_quote.models import Breakdown, Selection, TrainerLine
from training_quote.pricing import (
    compute_breakdown,
    is_traveling,
    trainer_fee,
    trainer_travel_cost,
    travel_components,
)

logger = logging.getLogger(__name__)

Row = List[str]

ADMIN_LABEL = f"Administrative Cost ({ADMIN_PERCENTAGE:.0%})"
QUOTE_VALIDITY_DAYS = 30


# =========================================================
# FORMATTING
# =========================================================
def format_amount(value) -> str:
    """en-US grouping with at most three fraction digits: 1,000 / 1,234.5"""
    text = f"{float(value):,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_hours(value) -> str:
    return f"{float(value):g}"


def format_generated_on(now: datetime) -> str:
    local = now.astimezone() if now.tzinfo else now
    hour = local.hour % 12 or 12
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local:%M:%S %p}"


def quote_filename(now: datetime, extension: str = "csv") -> str:
    """training-quote-2026-10-19T09-36-00-123Z.csv"""
    utc = now.astimezone(timezone.utc)
    stamp = utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"training-quote-{re.sub(r'[:.]', '-', stamp)}.{extension}"


def trainer_label(selection: Selection, line: TrainerLine) -> str:
    label = ROLE_LABELS[line.role]
    if selection.is_in_person and selection.travel_costing is TravelCosting.FLAT_FEE:
        label += f" - {selection.travel_time.value}"
    else:
        label += f" - {LOCATION_LABELS[line.location]}"
    return f"{label} ({line.count})"


# =========================================================
# ROW BUILDING
# =========================================================
def _trainer_rows(selection: Selection) -> List[Row]:
    rows = []
    for line in selection.trainers:
        value = f"Training: {format_amount(trainer_fee(selection, line))}"
        if is_traveling(selection, line):
            value += f" | Travel: {format_amount(trainer_travel_cost(selection, line))}"
        rows.append([trainer_label(selection, line), value])
    return rows


def _travel_detail_rows(selection: Selection) -> List[Row]:
    if not selection.is_in_person or selection.travel_costing is not TravelCosting.ITEMIZED:
        return []
    rows = []
    for line in selection.trainers:
        if not is_traveling(selection, line):
            continue
        parts = travel_components(line)
        if parts:
            rows.append([
                f"  {ROLE_LABELS[line.role]} travel ({line.count})",
                " | ".join(f"{name}: {format_amount(amount)}" for name, amount in parts),
            ])
    return rows


def build_quote_rows(selection: Selection, breakdown: Breakdown, now: datetime) -> List[Row]:
    parameters = [
        ["Training Type", TRAINING_TYPE_LABELS[selection.training_type]],
        ["Duration", DURATION_LABELS[selection.duration]],
    ]
    if selection.is_in_person:
        parameters.append(["Travel Costing", TRAVEL_COSTING_LABELS[selection.travel_costing]])
        if selection.travel_costing is TravelCosting.FLAT_FEE:
            parameters.append(["Travel Time", selection.travel_time.value])

    costs = [["Total Training Fees", format_amount(breakdown.trainers_cost)]]
    if selection.is_in_person and breakdown.traveling_count > 0:
        costs.append(["Total Travel Fees", format_amount(breakdown.travel_price)])
    costs += [
        ["Project Management", format_amount(breakdown.pm_cost)],
        ["Subtotal", format_amount(breakdown.subtotal)],
        [ADMIN_LABEL, format_amount(breakdown.admin_cost)],
    ]

    return [
        ["Training Price Calculation", ""],
        ["Generated on", format_generated_on(now)],
        [""],
        ["Parameters"],
        *parameters,
        [""],
        ["Trainers"],
        *_trainer_rows(selection),
        *_travel_detail_rows(selection),
        [""],
        ["Project Management Hours", format_hours(selection.pm_hours)],
        [""],
        ["Cost Breakdown"],
        *costs,
        [""],
        ["Total", format_amount(breakdown.total)],
    ]


def rows_to_csv(rows: List[Row]) -> str:
    def quote(cell):
        return '"' + str(cell).replace('"', '""') + '"'
    return "\n".join(",".join(quote(cell) for cell in row) for row in rows)


def _log_fields(selection, breakdown, file_name=None):
    fields = {
        "total": format_amount(breakdown.total),
        "training_type": selection.training_type.value,
        "travel_costing": selection.travel_costing.value,
    }
    if file_name:
        fields["file_name"] = file_name
    return fields


def export_quote(selection: Selection, now: Optional[datetime] = None) -> Tuple[str, bytes]:
    """
    Build the CSV download for a selection.

    The breakdown is re-derived here rather than taken from the caller so
    the file always matches the selection it describes.

    Returns (file_name, utf-8 encoded csv content).
    """
    now = now or datetime.now(timezone.utc)
    breakdown = compute_breakdown(selection)
    content = rows_to_csv(build_quote_rows(selection, breakdown, now))
    file_name = quote_filename(now)
    logger.debug("Built quote CSV %s", file_name, extra=_log_fields(selection, breakdown, file_name))
    return file_name, content.encode("utf-8")


# =========================================================
# ON-SCREEN SUMMARY
# =========================================================
def breakdown_table(selection: Selection, breakdown: Breakdown) -> pd.DataFrame:
    data = []
    for line in selection.trainers:
        data.append(["Trainer Fee", trainer_label(selection, line), line.count,
                     f"${format_amount(trainer_fee(selection, line))}"])
    for line in selection.trainers:
        if is_traveling(selection, line):
            data.append(["Travel", trainer_label(selection, line), line.count,
                         f"${format_amount(trainer_travel_cost(selection, line))}"])
    if selection.pm_hours > 0:
        data.append(["Project Management", f"PM Hours (${PM_RATE}/hour)",
                     format_hours(selection.pm_hours), f"${format_amount(breakdown.pm_cost)}"])
    data.append(["Subtotal", "", "-", f"${format_amount(breakdown.subtotal)}"])
    data.append(["Administrative", ADMIN_LABEL, "-", f"${format_amount(breakdown.admin_cost)}"])
    data.append(["Total", "", "-", f"${format_amount(breakdown.total)}"])

    df = pd.DataFrame(data, columns=["Category", "Item", "Quantity", "Amount"])
    return df.astype(str)


# =========================================================
# PDF
# =========================================================
def generate_pdf(selection: Selection, breakdown: Breakdown, now: Optional[datetime] = None) -> bytes:
    now = now or datetime.now(timezone.utc)
    valid_through = now + timedelta(days=QUOTE_VALIDITY_DAYS)

    buffer = BytesIO()
    pdf_doc = SimpleDocTemplate(buffer, pagesize=letter)
    styles = getSampleStyleSheet()
    elements = [
        Paragraph(APP_TITLE, styles["Title"]),
        Paragraph(f"Generated on: {format_generated_on(now)}", styles["Normal"]),
        Paragraph(f"Training Type: {TRAINING_TYPE_LABELS[selection.training_type]}", styles["Normal"]),
        Paragraph(f"Duration: {DURATION_LABELS[selection.duration]}", styles["Normal"]),
        Spacer(1, 12),
    ]

    df = breakdown_table(selection, breakdown)
    table = Table([list(df.columns)] + df.values.tolist(), colWidths=[110, 200, 60, 100])
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.black),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), 10),
        ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
        ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    elements.append(table)
    elements.append(Spacer(1, 12))
    elements.append(Paragraph(f"Total: ${format_amount(breakdown.total)}", styles["Heading2"]))
    elements.append(Paragraph(
        f"This quote is valid through {valid_through:%B} {valid_through.day}, {valid_through:%Y}. "
        "Travel costs are estimates and are billed at actual cost.",
        styles["Normal"],
    ))

    pdf_doc.build(elements)
    pdf_data = buffer.getvalue()
    buffer.close()
    logger.debug("Built quote PDF", extra=_log_fields(selection, breakdown))
    return pdf_data
