"""HTML log files and error reports."""

from __future__ import annotations

import sys
from pathlib import Path
from types import TracebackType
from typing import TextIO

LOG_DIR = "/tmp/"
LOGFILE_NAME = "vector_test.html"

REPORT_PARAMS_ERROR = "Invalid parameters passed to log report"

_HEAD = (
    "<html><head>"
    "<style>\n .outline {\n border: 0px solid black;"
    "\n padding: 0 10px;"
    '\n bgcolor = "#196fA1";'
    '\n color = "white";'
    "\n}\n </style>"
    "<style>\n .table { \n background: lightgrey;"
    "\n padding: 5px; border: 1px solid black;"
    "\n}\n</style>"
    "<style> \n td {\n border: 1px solid black;\n}\n </style>"
    "</head>"
    '\n<body bgcolor = "#777777">'
)

_TAIL = "</body></html>"


def default_log_path(filename: str = LOGFILE_NAME) -> Path:
    """Path of a log file with the given name in the log directory."""
    if not filename:
        raise ValueError("Incorrect log file name.")
    return Path(LOG_DIR) / filename


def _error_text(message: str, func_name: str, file_name: str, line: int) -> str:
    return (
        "\nAn error occured, my condolences((\n\n"
        f"File: {file_name}\n"
        f"Function: {func_name}\n"
        f"Line: {line}\n"
    ), message


class HtmlLog:
    """An HTML log file; opened on creation, closed by ``close`` or on leaving a ``with`` block."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._file: TextIO | None = self.path.open("w", encoding="utf-8")
        self.write_head()

    @property
    def closed(self) -> bool:
        """Whether the log has been closed."""
        return self._file is None

    def write_head(self) -> None:
        """Write the HTML head and the opening of the body."""
        if self._file is None:
            return
        self._file.write(_HEAD)

    def report(self, func_name: str, file_name: str, line: int, caller: str) -> None:
        """Record that ``caller`` was entered from the given place."""
        if not check_report_params(func_name, file_name, line):
            return
        if self._file is None:
            return
        self._file.write("\n<pre>\n")
        self._file.write(
            '<div class="outline"  '
            'style = "background-color:lightgrey;" '
            f'style = "text-align: center;"><b>Funtion: {caller}\n\n</b> '
            f"Called from: function: <b>{func_name}</b>, file: <b>{file_name}</b>."
            f"Current line: <b>{line}</b>.\n </div>"
        )
        self._file.write("\n</pre>\n")
        self._file.flush()

    def simple_report(self, func_name: str, file_name: str, line: int) -> None:
        """Record the current place without naming a caller."""
        if not check_report_params(func_name, file_name, line):
            return
        if self._file is None:
            return
        self._file.write("\n<pre>\n")
        self._file.write(
            '<div class="outline"  '
            'style = "background-color:lightgrey;" '
            f'style = "text-align: center;"><b>Funtion: {func_name}\n\n</b> '
            f"File: <b>{file_name}</b>. Current line: <b>{line}</b>.\n </div>"
        )
        self._file.write("\n</pre>\n")

    def error(self, message: str, func_name: str, file_name: str, line: int) -> None:
        """Write a highlighted error block."""
        if self._file is None:
            return
        self._file.write(
            '\n\n<div style = " font-size: 15;'
            " text-align: center;"
            " color: white;"
            ' background-color: red;"><pre>\n'
        )
        self._file.write("\nACHTUNG!!\n")
        self._file.write("\nAn error occured, my condolences((\n\n")
        self._file.write(f"File: {file_name}\n")
        self._file.write(f"Function: {func_name}\n")
        self._file.write(f"Line: {line}\n\n")
        self._file.write(f"{message}\n\n")
        self._file.write("\n</pre></div>\n")
        self._file.flush()

    def close(self) -> None:
        """Finish the HTML document and close the file; later calls do nothing."""
        if self._file is None:
            return
        self._file.write(_TAIL)
        file, self._file = self._file, None
        file.close()

    def __enter__(self) -> HtmlLog:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def error_report(
    message: str,
    func_name: str,
    file_name: str,
    line: int,
    log: HtmlLog | None = None,
) -> None:
    """Print an error report to stderr and, when a log is given, into the log too."""
    stderr = sys.stderr
    stderr.write("\n ACHTUNG!!\n")
    stderr.write("\nAn error occured, my condolences((\n\n")
    stderr.write(f"File: {file_name}\n")
    stderr.write(f"Function: {func_name}\n")
    stderr.write(f"Line: {line}\n")
    stderr.write(f"{message}\n\n")
    stderr.flush()

    if log is not None and not log.closed:
        stderr.write(
            "This message also reported in log file,"
            " see logs to get more information about"
            " programm performing\n"
        )
        log.error(message, func_name, file_name, line)


def check_report_params(func_name: str | None, file_name: str | None, line: int) -> bool:
    """Validate the place given to a log report; report and return False if it is invalid."""
    if line <= 0 or file_name is None or func_name is None:
        error_report(REPORT_PARAMS_ERROR, "check_report_params", __file__, 0)
        return False
    return True