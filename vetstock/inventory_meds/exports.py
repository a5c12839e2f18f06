import csv
from io import BytesIO, StringIO

import openpyxl
from openpyxl.styles import Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer

from .reports import AVAILABLE_COLUMNS, EXPIRED_COLUMNS, SUMMARY_COLUMNS

TABLE_STYLE = TableStyle([
    ('BACKGROUND', (0, 0), (-1, 0), colors.grey),
    ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
    ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
    ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
    ('FONTSIZE', (0, 0), (-1, 0), 10),
    ('BOTTOMPADDING', (0, 0), (-1, 0), 12),
    ('BACKGROUND', (0, 1), (-1, -1), colors.beige),
    ('GRID', (0, 0), (-1, -1), 1, colors.black)
])

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(start_color="CCCCCC", end_color="CCCCCC", fill_type="solid")


def _sections(report):
    return [
        ("Summary", SUMMARY_COLUMNS, report.summary_rows),
        ("Available", AVAILABLE_COLUMNS, report.available_rows),
        ("Expired", EXPIRED_COLUMNS, report.expired_rows),
    ]


def export_report_csv(report):
    """Export the report sections one after another in a single CSV"""
    output = StringIO()
    writer = csv.writer(output)

    for index, (title, columns, rows) in enumerate(_sections(report)):
        if index:
            writer.writerow([])
        writer.writerow([title])
        writer.writerow(columns)
        for row in rows:
            writer.writerow([row[column] for column in columns])

    return output.getvalue().encode('utf-8')


def export_report_excel(report):
    """Export the report to an Excel workbook, one sheet per section"""
    wb = openpyxl.Workbook()
    wb.remove(wb.active)

    for title, columns, rows in _sections(report):
        ws = wb.create_sheet(title)

        # Headers
        for col_num, header in enumerate(columns, 1):
            cell = ws.cell(row=1, column=col_num, value=header)
            cell.font = HEADER_FONT
            cell.fill = HEADER_FILL

        # Data
        for row_num, row in enumerate(rows, 2):
            for col_num, column in enumerate(columns, 1):
                ws.cell(row=row_num, column=col_num, value=row[column])

    output = BytesIO()
    wb.save(output)
    return output.getvalue()


def _table(columns, rows):
    data = [columns]
    for row in rows:
        data.append([str(row[column]) for column in columns])
    table = Table(data)
    table.setStyle(TABLE_STYLE)
    return table


def export_report_pdf(report, title="Medicine Inventory Report"):
    """Export the report to an A4 PDF document"""
    output = BytesIO()
    doc = SimpleDocTemplate(output, pagesize=A4, title=title)
    styles = getSampleStyleSheet()

    elements = [
        Paragraph(f"<b>{title}</b>", styles['Title']),
        Paragraph(report.facility_label, styles['Normal']),
        Spacer(1, 12),
        _table(SUMMARY_COLUMNS, report.summary_rows),
        Spacer(1, 18),
        Paragraph("<b>Available Medicines</b>", styles['Heading2']),
    ]
    if report.available_rows:
        elements.append(_table(AVAILABLE_COLUMNS, report.available_rows))
    else:
        elements.append(Paragraph("No available medicines.", styles['Normal']))

    elements += [Spacer(1, 18), Paragraph("<b>Expired Medicines</b>", styles['Heading2'])]
    if report.expired_rows:
        elements.append(_table(EXPIRED_COLUMNS, report.expired_rows))
    else:
        elements.append(Paragraph("No expired medicines.", styles['Normal']))

    doc.build(elements)
    return output.getvalue()


EXPORT_FORMATS = {
    'pdf': (export_report_pdf, 'application/pdf'),
    'xlsx': (export_report_excel,
             'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'),
    'csv': (export_report_csv, 'text/csv'),
}
