"""工单 PDF 生成

输入为 get_work_order_detail 组装好的 WorkOrderDetail，输出 PDF 字节。
"""

import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..schemas import WorkOrderDetail
from .helpers import format_completion, format_date, format_dates, format_datetime, text_or_empty

ITEM_COLUMNS = ["#", "Type", "Scope", "Elevation", "Qty", "Status", "Hold Reason", "Completion"]


def _summary_rows(order):
    return [
        ["Work Order #", order.work_order_number, "Status", order.status],
        ["Job #", text_or_empty(order.job_number), "Job Name", text_or_empty(order.job_name)],
        ["PM", text_or_empty(order.job_pm), "Superintendent", text_or_empty(order.job_superintendent)],
        ["Address", text_or_empty(order.job_address), "Division / System",
         f"{text_or_empty(order.division)} / {text_or_empty(order.system)}"],
        ["Date Issued", format_date(order.date_issued), "Material Delivery", format_date(order.material_delivery_date)],
        ["Requested Completion", format_dates(order.requested_completion_dates),
         "Completion", format_completion(order.completion_date, order.completion_varies)],
    ]


def render_work_order_pdf(detail: WorkOrderDetail) -> bytes:
    """渲染工单 PDF"""
    order = detail.order
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=LETTER,
        topMargin=0.6 * inch,
        bottomMargin=0.6 * inch,
        title=order.work_order_number,
    )

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle('Title', parent=styles['Title'], fontSize=18, spaceAfter=12)
    heading_style = ParagraphStyle('Heading', parent=styles['Heading2'], fontSize=13, spaceBefore=12, spaceAfter=6)
    body_style = styles['Normal']

    story = [
        Paragraph(f"Work Order {escape(order.work_order_number)}", title_style),
        Paragraph(f"Generated {format_datetime(order.updated_at)}", body_style),
        Spacer(1, 12),
    ]

    summary = Table(_summary_rows(order), colWidths=[1.4 * inch, 2.2 * inch, 1.4 * inch, 2.2 * inch])
    summary.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('FONTNAME', (2, 0), (2, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    story.append(summary)

    story.append(Paragraph("Items", heading_style))
    if detail.items:
        rows = [ITEM_COLUMNS]
        for item in detail.items:
            rows.append([
                str(item.seq),
                text_or_empty(item.type),
                text_or_empty(item.scope),
                text_or_empty(item.elevation),
                str(item.quantity),
                item.status,
                text_or_empty(item.hold_reason),
                format_dates(item.completion_dates),
            ])
        items_table = Table(rows, repeatRows=1)
        items_table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 8),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
        ]))
        story.append(items_table)
    else:
        story.append(Paragraph("No items.", body_style))

    if order.notes:
        story.append(Paragraph("Notes", heading_style))
        story.append(Paragraph(escape(order.notes).replace("\n", "<br/>"), body_style))

    doc.build(story)
    return buffer.getvalue()
