import openpyxl
from openpyxl.styles import Font, PatternFill, Alignment
from io import BytesIO


class ExcelGenerator:
    """
    Write-only xlsx builder for admin exports.
    Columns are declared as dicts: {'header', 'field', optional 'formatter'}.
    'field' is a dotted attribute path (tour.title) or a callable taking the row object.
    """

    def __init__(self, title="Export", creator="Travel Booking System"):
        self.workbook = openpyxl.Workbook(write_only=True)
        self.worksheet = self.workbook.create_sheet(title=title)
        self.workbook.properties.creator = creator

        self.header_font = Font(bold=True, color="FFFFFF")
        self.header_fill = PatternFill(start_color="0E7490", end_color="0E7490", fill_type="solid")
        self.header_alignment = Alignment(horizontal="center", vertical="center")

    def generate(self, queryset, columns):
        header_row = []
        for col_def in columns:
            cell = openpyxl.cell.WriteOnlyCell(self.worksheet, value=col_def['header'])
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.header_alignment
            header_row.append(cell)
        self.worksheet.append(header_row)

        rows = queryset.iterator() if hasattr(queryset, 'iterator') else queryset
        for obj in rows:
            row = []
            for col_def in columns:
                value = self._get_value(obj, col_def['field'])
                formatter = col_def.get('formatter')
                if callable(formatter):
                    value = formatter(value)
                row.append(value)
            self.worksheet.append(row)

        output = BytesIO()
        self.workbook.save(output)
        output.seek(0)
        return output

    def _get_value(self, obj, field):
        if callable(field):
            return field(obj)

        value = obj
        for attr in field.split('.'):
            value = getattr(value, attr, '')
            if value is None:
                break
        return value
