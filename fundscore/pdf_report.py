from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas
from reportlab.lib.units import cm
from datetime import datetime, timezone
from io import BytesIO

def safe_text(x) -> str:
    return str(x or "").replace("\n", " ").strip()

def build_pdf_report(playbook: dict) -> bytes:
    """Render one evaluation's playbook into PDF bytes (kept in memory only)."""
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    width, height = A4

    y = height - 2 * cm

    def ensure_room(font=("Helvetica", 11)):
        nonlocal y
        if y < 3 * cm:
            c.showPage()
            y = height - 2 * cm
            c.setFont(*font)

    def heading(text: str):
        nonlocal y
        y -= 0.3 * cm
        ensure_room()
        c.setFont("Helvetica-Bold", 12)
        c.drawString(2 * cm, y, text)
        y -= 0.8 * cm
        c.setFont("Helvetica", 11)

    def paragraph(text: str, prefix: str = ""):
        nonlocal y
        for chunk in split_text(f"{prefix}{safe_text(text)}", 95):
            c.drawString(2 * cm, y, chunk)
            y -= 0.55 * cm
            ensure_room()

    # Header
    c.setFont("Helvetica-Bold", 18)
    c.drawString(2 * cm, y, "Startup Funding Score Report")
    y -= 1.0 * cm

    c.setFont("Helvetica", 10)
    generated = datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")
    c.drawString(2 * cm, y, f"Generated: {generated}")
    y -= 0.5 * cm
    c.drawString(
        2 * cm, y,
        f"Engine Version: {safe_text(playbook.get('engine_version', '—'))} | "
        f"Ruleset Version: {safe_text(playbook.get('ruleset_version', '—'))}",
    )
    y -= 1.0 * cm

    # Overview
    band = playbook.get("band") or {}
    heading("Score Overview")
    lines = [
        f"Funding Score: {playbook.get('rounded_score')} / {playbook.get('max_score', 100):g}",
        f"Stage: {safe_text(band.get('label'))}",
    ]
    for line in lines:
        c.drawString(2 * cm, y, line)
        y -= 0.6 * cm
    paragraph(playbook.get("summary", ""))

    # Category analysis
    heading("Category Analysis")
    breakdown = playbook.get("breakdown") or {}
    for row in breakdown.get("categories", []):
        c.drawString(2 * cm, y, f"- {safe_text(row.get('title'))}: {row.get('display')} ({row.get('percent')}%)")
        y -= 0.55 * cm
        ensure_room()

    # Recommendations
    heading("Key Recommendations")
    paragraph(playbook.get("next_steps", ""), prefix="Next Steps: ")
    paragraph(playbook.get("focus_areas", ""), prefix="Focus Areas: ")
    paragraph(playbook.get("funding_strategy", ""), prefix="Funding Strategy: ")

    flags = playbook.get("flags") or []
    if flags:
        heading("Risk Flags")
        for f in flags:
            paragraph(f, prefix="- ")

    # Weakest categories
    actions = playbook.get("actions") or []
    heading("Where to Improve First")
    if actions:
        for a in actions:
            c.setFont("Helvetica-Bold", 11)
            c.drawString(2 * cm, y, f"{safe_text(a.get('title'))} ({a.get('percent')}% of max)")
            y -= 0.6 * cm
            c.setFont("Helvetica", 11)
            ensure_room()
            for step in a.get("recommended_actions", []):
                paragraph(step, prefix="- ")
    else:
        c.drawString(2 * cm, y, "None.")
        y -= 0.55 * cm

    c.showPage()
    c.save()
    return buf.getvalue()

def split_text(text: str, max_len: int):
    words = text.split()
    if not words:
        return []
    lines = []
    line = ""
    for w in words:
        if len(line) + len(w) + 1 <= max_len:
            line = (line + " " + w).strip()
        else:
            if line:
                lines.append(line)
            line = w
    if line:
        lines.append(line)
    return lines
