# core/formatters.py

# all pure text utilities
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_rule(width: int = 75) -> str:
    return "=" * width


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    noun = singular if count == 1 else (plural or f"{singular}s")

    return f"{count} {noun}"


# === marks formatters ===


def format_percentage(value: float, places: int = 1) -> str:
    return f"{value:.{places}f}%"
