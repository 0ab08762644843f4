import params


def normalize_state_id(value) -> str:
    """Trimmed, upper-case state id used to join the state-level tables."""
    if value is None:
        return ''
    return str(value).strip().upper()


def safe_int(x):
    try:
        return int(x)
    except Exception:
        return 0


def margin_str(margin) -> str:
    """
    Convert an A-minus-B margin (fraction of the vote) to a string (ex. A+1.2, B+11.2)
    """
    if margin is None:
        return 'EVEN'
    prefix = 'A+' if margin > 0 else 'B+'
    if margin > params.EVEN_MARGIN or margin < -params.EVEN_MARGIN:
        return f"{prefix}{abs(margin * 100):.1f}"
    else:
        return "EVEN"


def winner_color(winner: str) -> str:
    return params.COLORS.get(winner, params.COLORS['T'])
