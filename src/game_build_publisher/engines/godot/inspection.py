"""Post-match checks for Godot exports."""

from pathlib import Path

COI_SERVICEWORKER_MARKER = "coi-serviceworker"
COI_SERVICEWORKER_URL = "https://github.com/gzuidhof/coi-serviceworker"


def check_cors_fix(build_dir: Path) -> list[str]:
    """Warn when a web export lacks the cross-origin isolation shim.

    Godot 4 web exports need SharedArrayBuffer, which itch.io only
    provides when coi-serviceworker.js is loaded from index.html.

    Args:
        build_dir: Directory containing the web export

    Returns:
        Notes to print; empty when the shim is referenced
    """
    index_path = build_dir / "index.html"
    if not index_path.is_file():
        return []

    content = index_path.read_text(encoding="utf-8", errors="replace")
    if COI_SERVICEWORKER_MARKER in content:
        return []

    return [
        "Web export missing CORS fix (coi-serviceworker.js)",
        f"Get it from: {COI_SERVICEWORKER_URL}",
    ]


def inspect_godot_build(tag: str, build_dir: Path) -> list[str]:
    if tag == "web":
        return check_cors_fix(build_dir)
    return []
