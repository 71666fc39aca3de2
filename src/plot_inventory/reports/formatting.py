def fmt_number(value):
    """ Report-safe count formatter.
    - None -> 'N/A'
    - Int / float -> comma separated
    """
    if value is None:
        return "N/A"
    try:
        return f"{int(value):,}"
    except (ValueError, TypeError):
        return str(value)


def fmt_rate(value, digits=1):
    """ Usage rate formatter. Rates are already percentages (92.3 -> '92.3%').
    - None -> 'N/A'
    """
    if value is None:
        return "N/A"
    try:
        return f"{float(value):.{digits}f}%"
    except (ValueError, TypeError):
        return str(value)


def fmt_sqm(value):
    """ Area formatter: up to 3 decimals, trailing zeros dropped (2.475㎡, 3.6㎡, 12㎡)."""
    if value is None:
        return "N/A"
    try:
        text = f"{float(value):,.3f}".rstrip("0").rstrip(".")
        return f"{text}㎡"
    except (ValueError, TypeError):
        return str(value)
