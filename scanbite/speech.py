from scanbite.models import AnalyzeFoodItemOutput


def _number(value) -> str:
    # 80.0 -> "80", 7.5 -> "7.5"
    return f"{value:g}"


def spoken_summary(result: AnalyzeFoodItemOutput) -> str:
    """Text the scan page reads aloud after an analysis."""
    ident = result.identification
    parts = [f"Scanned item: {ident.name or 'Unknown item'}."]
    if result.edibility:
        parts.append(f"Edibility: {result.edibility}.")
    if ident.dominant_colors:
        parts.append(f"Dominant colors observed: {', '.join(ident.dominant_colors)}.")
    components = result.components
    if components and components.water_percentage is not None:
        parts.append(f"Water content: {_number(components.water_percentage)} percent.")
    if components and components.sugar_percentage is not None:
        parts.append(f"Sugar content: {_number(components.sugar_percentage)} percent.")
    return " ".join(parts)
