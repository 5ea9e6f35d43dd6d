"""Post-match checks for Ren'Py distributions."""

from pathlib import Path

WEB_RUNTIME_MARKERS = ("pyodide", "renpy-web")


def describe_web_build(build_dir: Path) -> list[str]:
    """Summarize a Ren'Py web build: index size, runtime marker, file count."""
    index_path = build_dir / "index.html"
    if not index_path.is_file():
        return []

    notes = [f"index.html: {index_path.stat().st_size / 1024:.1f} KB"]

    content = index_path.read_text(encoding="utf-8", errors="replace")
    if any(marker in content for marker in WEB_RUNTIME_MARKERS):
        notes.append("Ren'Py Web (Pyodide WASM)")

    # Ren'Py web builds are typically many files
    file_count = sum(1 for _ in build_dir.iterdir())
    notes.append(f"{file_count} files total")
    return notes


def find_launcher(build_dir: Path, tag: str) -> str | None:
    """Return the launcher name for a desktop build, if one is present."""
    for entry in sorted(build_dir.iterdir()):
        name = entry.name
        if tag == "windows" and name.endswith(".exe") and "mac" not in name:
            return name
        if tag == "macos" and (name.endswith(".app") or name.endswith("mac.zip")):
            return name
        # Linux launchers typically have no extension
        if tag == "linux" and "." not in name and entry.is_file():
            return name
    return None


def describe_desktop_build(build_dir: Path, tag: str) -> list[str]:
    notes = []

    launcher = find_launcher(build_dir, tag)
    if launcher:
        notes.append(f"Launcher: {launcher}")

    if (build_dir / "lib").is_dir():
        notes.append("Ren'Py runtime included (lib/)")

    return notes


def inspect_renpy_build(tag: str, build_dir: Path) -> list[str]:
    if tag == "web":
        return describe_web_build(build_dir)
    return describe_desktop_build(build_dir, tag)
