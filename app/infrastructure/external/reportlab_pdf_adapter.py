# app/infrastructure/external/reportlab_pdf_adapter.py
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from app.domain.models.credit_note import CreditNote, TipoPersona
from app.domain.ports.credit_note_renderer import CreditNoteRenderer

CODIGO_FORMATO = "F-1-C-E-12"
VERSION_FORMATO = "10"


class ReportLabCreditNoteRenderer(CreditNoteRenderer):
    """
    Genera la "Solicitud de emisión nota de crédito" en PDF a partir de una
    nota ya registrada. Solo lee la entidad.
    """

    def __init__(self, page_size=A4):
        self.page_size = page_size
        self.styles = self._setup_styles()

    def _setup_styles(self):
        styles = getSampleStyleSheet()
        styles.add(ParagraphStyle(name="Cabecera", fontSize=8, alignment=TA_CENTER, fontName="Helvetica", leading=10))
        styles.add(ParagraphStyle(name="CabeceraDato", fontSize=8, alignment=TA_LEFT, fontName="Helvetica", leading=10))
        styles.add(ParagraphStyle(name="Etiqueta", fontSize=9, fontName="Helvetica-Bold", alignment=TA_LEFT))
        styles.add(ParagraphStyle(name="Valor", fontSize=9, fontName="Helvetica", alignment=TA_LEFT))
        styles.add(ParagraphStyle(name="Monto", fontSize=11, fontName="Helvetica-Bold", alignment=TA_LEFT))
        styles.add(ParagraphStyle(name="MontoLetras", fontSize=8, fontName="Helvetica-Oblique", alignment=TA_LEFT))
        styles.add(ParagraphStyle(name="Firma", fontSize=9, fontName="Helvetica-Bold", alignment=TA_CENTER))
        styles.add(ParagraphStyle(name="FirmaTexto", fontSize=9, fontName="Helvetica", alignment=TA_LEFT))
        return styles

    def _p(self, texto, estilo: str) -> Paragraph:
        return Paragraph(escape(str(texto)), self.styles[estilo])

    def _cabecera(self, note: CreditNote) -> Table:
        s = self.styles
        izquierda = [
            self._p("UNIDAD DE GESTIÓN GOBIERNO Y ADMINISTRACIÓN", "Cabecera"),
            self._p("DIRECCIÓN GENERAL DE ADMINISTRACIÓN", "Cabecera"),
            self._p("SISTEMA DE GESTIÓN DE LA CALIDAD", "Cabecera"),
            Paragraph("<b>SOLICITUD DE EMISIÓN NOTA DE CRÉDITO</b>", s["Cabecera"]),
            self._p("(Bienes, servicios, proyectos, protocolos y otros)", "Cabecera"),
        ]
        derecha = [
            Paragraph(f"<b>Código:</b> {CODIGO_FORMATO}", s["CabeceraDato"]),
            Paragraph(f"<b>Versión:</b> {VERSION_FORMATO} - {note.created_at.strftime('%d/%m/%Y')}", s["CabeceraDato"]),
            Paragraph("<b>División:</b> Finanzas", s["CabeceraDato"]),
            Paragraph("<b>Página:</b> 1 de 1", s["CabeceraDato"]),
        ]
        tabla = Table([[izquierda, derecha]], colWidths=[12 * cm, 5 * cm])
        tabla.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]))
        return tabla

    def _detalle(self, note: CreditNote) -> Table:
        juridica = note.tipo == TipoPersona.JURIDICA
        monto = [
            self._p(f"S/ {note.monto_pagar:,.2f}", "Monto"),
            self._p(note.monto_letras, "MontoLetras"),
        ]
        filas = [
            ("TIPO COMPROBANTE", "FACTURA" if juridica else "BOLETA DE VENTA"),
            ("Razón Social" if juridica else "Nombre Completo", note.nombre_completo),
            ("RUC" if juridica else "DNI", (note.ruc if juridica else note.dni) or "N/A"),
            ("Dependencia Solicitante", note.datos_estaticos.dependencia_solicitante),
            ("Persona de Contacto", note.datos_estaticos.persona_contacto),
            ("Anexo", note.datos_estaticos.anexo),
            ("Monto a Pagar", None),
            ("N° Documento de Origen", note.numero_documento_origen),
            ("Concepto de Nota de Crédito", note.concepto_nota),
            ("Fecha de Caducidad", note.fecha_caducidad.strftime("%d/%m/%Y")),
            ("Responsable de la Unidad", note.responsable_unidad),
        ]
        data = [
            [self._p(etiqueta, "Etiqueta"), monto if valor is None else self._p(valor, "Valor")]
            for etiqueta, valor in filas
        ]
        tabla = Table(data, colWidths=[6 * cm, 11 * cm])
        tabla.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.Color(0.93, 0.93, 0.93)),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]))
        return tabla

    def _firmas(self, note: CreditNote) -> Table:
        banco = note.banco.nombre if note.banco else "No especificado"
        transferencia = [
            self._p("APLICACIÓN DE LA NOTA DE CRÉDITO", "Firma"),
            self._p("TRANSFERENCIA BANCARIA", "Firma"),
            Spacer(1, 6),
            self._p(f"Banco: {banco}", "FirmaTexto"),
            self._p(f"Cuenta: {note.numero_cuenta or 'No especificada'}", "FirmaTexto"),
            self._p(f"CCI: {note.cci or 'No especificado'}", "FirmaTexto"),
        ]
        firma = [
            Spacer(1, 2.5 * cm),
            self._p("FIRMA Y SELLO DEL RESPONSABLE DE LA UNIDAD", "Firma"),
        ]
        tabla = Table([[transferencia, firma]], colWidths=[8.5 * cm, 8.5 * cm])
        tabla.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
        ]))
        return tabla

    def render(self, note: CreditNote) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            leftMargin=2 * cm, rightMargin=2 * cm, topMargin=1.5 * cm, bottomMargin=1.5 * cm,
            title=f"Nota de Crédito - {note.nombre_completo}",
        )
        story = [
            self._cabecera(note),
            Spacer(1, 0.6 * cm),
            self._detalle(note),
            Spacer(1, 0.6 * cm),
            self._firmas(note),
        ]
        doc.build(story)
        return buffer.getvalue()
