from datetime import datetime, timezone


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string for timestamp columns."""
    return datetime.now(timezone.utc).isoformat()


def print_summary(title: str, stats: dict[str, int]) -> None:
    """Print a processing summary block."""
    print(f"\n{'=' * 60}")
    print(f"[{datetime.now()}] {title}")
    print(f"{'=' * 60}")
    for label, value in stats.items():
        print(f"{label + ':':<22}{value}")
    print(f"{'=' * 60}\n")
