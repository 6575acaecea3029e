"""Simple launcher for the city search app.

Asks whether to start the web page (Gradio) or the terminal prompt,
then runs the corresponding script with the project's virtualenv
interpreter when there is one.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

FRONT_ENDS = {
    "web": "apps/app.py",
    "terminal": "apps/terminal.py",
}
ALIASES = {
    "1": "web",
    "w": "web",
    "ui": "web",
    "2": "terminal",
    "t": "terminal",
    "cli": "terminal",
}


def _interpreter(project_root: Path) -> str:
    for candidate in (
        project_root / ".venv" / "bin" / "python",
        project_root / ".venv" / "Scripts" / "python.exe",
    ):
        if candidate.exists():
            return str(candidate)
    return sys.executable


def main() -> None:
    project_root = Path(__file__).resolve().parent

    print("=== City Search launcher ===")
    print(f"1) Web page  ({FRONT_ENDS['web']})")
    print(f"2) Terminal  ({FRONT_ENDS['terminal']})")
    choice = input("Choice (1/2, web/terminal): ").strip().lower()
    front_end = ALIASES.get(choice, choice)
    if front_end not in FRONT_ENDS:
        print("Unrecognised choice, starting the web page.")
        front_end = "web"

    script_path = project_root / FRONT_ENDS[front_end]
    if not script_path.exists():
        print(f"Cannot find {FRONT_ENDS[front_end]} in the project root.")
        sys.exit(1)

    cmd = [_interpreter(project_root), str(script_path)]
    print(f"Starting {FRONT_ENDS[front_end]} with: {' '.join(cmd)}")
    subprocess.run(cmd, check=False)


if __name__ == "__main__":
    main()
