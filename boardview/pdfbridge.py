"""Links to an external PDF viewer: search in it and follow its selection."""

from __future__ import annotations

import ast
import logging
import queue
import re
import subprocess
import threading
from pathlib import Path
from typing import Any, Iterable, Iterator, Protocol, Sequence

log = logging.getLogger(__name__)

EVINCE_DAEMON_NAME = "org.gnome.evince.Daemon"
EVINCE_DAEMON_PATH = "/org/gnome/evince/Daemon"
EVINCE_WINDOW_PATH = "/org/gnome/evince/Window/0"
EVINCE_WINDOW_INTERFACE = "org.gnome.evince.Window"

FIND_DOCUMENT_TIMEOUT = 10
SEARCH_TIMEOUT = 5

_RUNNER_ERRORS = (OSError, subprocess.SubprocessError)

_SIGNAL_LINE = re.compile(
    r"^(?P<path>\S+): (?P<interface>[\w.]+)\.(?P<name>\w+) (?P<params>\(.*\))\s*$"
)


class PDFBridge:
    """A viewer link that does nothing; used when no viewer is available."""

    def open_document(self, pdf_file: Any) -> None:
        """Show the document in the viewer; this bridge has no viewer."""

    def close_document(self) -> None:
        """Forget the open document; this bridge holds none."""

    def document_search(
        self, text: str, whole_words_only: bool = False, case_sensitive: bool = False
    ) -> None:
        """Search the document in the viewer; this bridge has no viewer."""

    def has_new_selection(self) -> bool:
        """Tell whether the viewer's selection changed; never here."""
        return False

    def selection(self) -> str:
        """The text currently selected in the viewer."""
        return ""


class Runner(Protocol):
    """Performs D-Bus method calls and watches D-Bus signals."""

    def call(
        self, destination: str, object_path: str, method: str, args: Sequence[str], timeout: int
    ) -> str: ...

    def monitor(self, destination: str, object_path: str) -> Iterable[str]: ...


class _ProcessLines:
    """Lines written by a running process, until it is closed."""

    def __init__(self, process: subprocess.Popen) -> None:
        self._process = process

    def __iter__(self) -> Iterator[str]:
        assert self._process.stdout is not None
        yield from self._process.stdout

    def close(self) -> None:
        self._process.terminate()
        try:
            self._process.wait(timeout=2)
        except subprocess.TimeoutExpired:
            self._process.kill()
            self._process.wait()


class GDBusRunner:
    """Talks to the session bus through the ``gdbus`` command-line tool."""

    def __init__(self, executable: str = "gdbus") -> None:
        self.executable = executable

    def call(
        self, destination: str, object_path: str, method: str, args: Sequence[str], timeout: int
    ) -> str:
        command = [
            self.executable, "call", "--session",
            "--dest", destination,
            "--object-path", object_path,
            "--method", method,
            "--timeout", str(timeout),
            *args,
        ]
        result = subprocess.run(
            command, capture_output=True, text=True, check=True, timeout=timeout + 5
        )
        return result.stdout

    def monitor(self, destination: str, object_path: str) -> _ProcessLines:
        command = [
            self.executable, "monitor", "--session",
            "--dest", destination,
            "--object-path", object_path,
        ]
        process = subprocess.Popen(
            command, stdout=subprocess.PIPE, stderr=subprocess.DEVNULL, text=True
        )
        return _ProcessLines(process)


def _gvariant_args(*values: str | bool) -> list[str]:
    """Write strings and booleans in GVariant text form, one argument each."""
    args = []
    for value in values:
        if isinstance(value, bool):
            args.append("true" if value else "false")
        else:
            escaped = str(value).replace("\\", "\\\\").replace("'", "\\'")
            args.append(f"'{escaped}'")
    return args


def _parse_tuple(text: str) -> tuple | None:
    try:
        value = ast.literal_eval(text.strip())
    except (ValueError, SyntaxError):
        return None
    return value if isinstance(value, tuple) else None


class EvinceBridge(PDFBridge):
    """Drives the Evince document viewer over the D-Bus session bus."""

    def __init__(self, runner: Runner | None = None) -> None:
        self.runner: Runner = runner if runner is not None else GDBusRunner()
        self._owner: str | None = None
        self._selection = ""
        self._pending: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._monitor: Iterable[str] | None = None
        self._thread: threading.Thread | None = None

    @property
    def owner(self) -> str | None:
        """Bus name of the viewer window showing the document, if any."""
        return self._owner

    def open_document(self, pdf_file: Any) -> None:
        """Ask Evince to show the PDF file and follow its window's selection."""
        path = getattr(pdf_file, "path", None)
        if not path or not Path(path).exists():
            log.error("EvinceBridge PDF file does not exist")
            return
        self._stop_monitor()
        self._owner = None
        uri = Path(path).resolve().as_uri()
        log.debug("EvinceBridge FindDocument: %s", uri)
        try:
            output = self.runner.call(
                EVINCE_DAEMON_NAME,
                EVINCE_DAEMON_PATH,
                f"{EVINCE_DAEMON_NAME}.FindDocument",
                _gvariant_args(uri, True),
                FIND_DOCUMENT_TIMEOUT,
            )
        except _RUNNER_ERRORS as exc:
            log.error("EvinceBridge FindDocument error: %s", exc)
            return
        parsed = _parse_tuple(output)
        owner = str(parsed[0]) if parsed else ""
        if not owner:
            log.error("EvinceBridge empty owner")
            return
        log.debug("EvinceBridge FindDocument owner: %s", owner)
        try:
            monitor = self.runner.monitor(owner, EVINCE_WINDOW_PATH)
        except _RUNNER_ERRORS as exc:
            log.error("EvinceBridge window error: %s", exc)
            return
        self._owner = owner
        self._monitor = monitor
        self._thread = threading.Thread(target=self._watch, args=(monitor,), daemon=True)
        self._thread.start()

    def _watch(self, lines: Iterable[str]) -> None:
        for line in lines:
            match = _SIGNAL_LINE.match(line.strip())
            if not match or match["interface"] != EVINCE_WINDOW_INTERFACE:
                continue
            parameters = _parse_tuple(match["params"])
            if parameters is not None:
                self.handle_signal(match["name"], parameters)

    def _stop_monitor(self) -> None:
        close = getattr(self._monitor, "close", None)
        if callable(close):
            close()
        if self._thread is not None:
            self._thread.join(timeout=1)
        self._monitor = None
        self._thread = None

    def close_document(self) -> None:
        """Stop following the viewer; Evince offers no way to close the document."""
        self._stop_monitor()
        self._owner = None

    def document_search(
        self, text: str, whole_words_only: bool = False, case_sensitive: bool = False
    ) -> None:
        """Run a search in the viewer window showing the document."""
        if self._owner is None:
            log.error("EvinceBridge attempting Search without any document open")
            return
        try:
            self.runner.call(
                self._owner,
                EVINCE_WINDOW_PATH,
                f"{EVINCE_WINDOW_INTERFACE}.Search",
                _gvariant_args(text, bool(whole_words_only), bool(case_sensitive)),
                SEARCH_TIMEOUT,
            )
        except _RUNNER_ERRORS as exc:
            log.error("EvinceBridge Search error: %s", exc)

    def handle_signal(self, signal_name: str, parameters: Sequence[Any]) -> None:
        """Take note of a signal from the viewer window; it applies on the next check."""
        log.debug("EvinceBridge Signal: %r", signal_name)
        if signal_name == "SelectionChanged" and parameters:
            self._pending.put(str(parameters[0]))

    def has_new_selection(self) -> bool:
        """Apply pending signals and tell whether the selection changed."""
        old = self._selection
        while True:
            try:
                self._selection = self._pending.get_nowait()
            except queue.Empty:
                break
        return old != self._selection

    def selection(self) -> str:
        """The text last selected in the viewer."""
        return self._selection