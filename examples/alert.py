"""Show a Finder alert and report which button was clicked (macOS only)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from pydantic import BaseModel, Field

from osajs import JavaScript, OsaError

ALERT = JavaScript(
    """
    var App = Application('Finder');
    App.includeStandardAdditions = true;
    return App.displayAlert($params.title, {
        message: $params.message,
        'as': $params.alert_type,
        buttons: $params.buttons,
    });
    """
)


class AlertParams(BaseModel):
    title: str
    message: str
    alert_type: str
    buttons: list[str]


class AlertResult(BaseModel):
    button: str = Field(alias="buttonReturned")


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    params = AlertParams(
        title="Something is on fire!",
        message="What is happening",
        alert_type="critical",
        buttons=["Show details", "Ignore"],
    )
    try:
        result = ALERT.execute_with_params(params, AlertResult)
    except OsaError as exc:
        logging.error("alert failed (%s): %s", exc.kind.value, exc)
        return 1
    print(f"You clicked '{result.button}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())
