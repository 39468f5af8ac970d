"""
Subprocess driver for the BART command-line toolkit.

Commands are given as positional arguments, exactly as on the command line:
``execute("fft", "-u", 7, kspace, "image")``. Strings, numbers and paths are
passed through; engine arrays are written to temporary ``.ra`` files whose
paths are passed instead. Temporary files are removed once the command has
finished, whatever its outcome.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
import tempfile
from functools import wraps
from pathlib import Path
from typing import Any, Callable, Optional

from typing_extensions import Concatenate, ParamSpec, TypeVar

from ...domain._bart_dims import BartDims
from ...domain._errors import BartError
from ..io._rawarray import load, save_to_temp
from ..ndarray import ComplexFloatNDArray, NDArrayBase
from ._executable import find_bart_executable

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")

OutputConsumer = Callable[[str], Any]
"""Receives the toolkit's standard output, line by line."""

_ANSI_ESCAPE = re.compile(r"\x1b\[[;\d]*m")


def _clean(line: str) -> str:
    return _ANSI_ESCAPE.sub("", line).replace("\r", "")


def with_temp_files(func: Callable[Concatenate[list, P], R]) -> Callable[P, R]:
    """
    Give `func` a list to collect temporary files into, and delete them
    after `func` returns or raises. Failures to start the process are
    reported as `BartError`.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        temp_files: list[Path] = []
        try:
            return func(temp_files, *args, **kwargs)
        except OSError as e:
            raise BartError(f"Running BART failed: {e}") from e
        finally:
            for path in temp_files:
                try:
                    os.unlink(path)
                    logger.debug("removed temporary file %s", path)
                except FileNotFoundError:
                    pass
                except OSError as e:
                    logger.warning("could not delete %s: %s", path, e)

    return wrapper


def convert_arguments(args: tuple[Any, ...], temp_files: list[Path]) -> list[str]:
    """
    Convert driver arguments to command-line strings.

    Raises
    ------
    TypeError
        If an argument has an unsupported type.
    """
    out: list[str] = []
    for arg in args:
        if isinstance(arg, NDArrayBase):
            path = save_to_temp(arg)
            temp_files.append(path)
            out.append(str(path))
        elif isinstance(arg, (str, os.PathLike)):
            out.append(os.fspath(arg))
        elif isinstance(arg, (int, float)) and not isinstance(arg, bool):
            out.append(str(arg))
        else:
            raise TypeError(f"Unsupported argument {arg!r} of type {type(arg).__name__}")
    return out


def _invoke(command: list[str], executable: Optional[str]) -> subprocess.CompletedProcess:
    exe = find_bart_executable(executable)
    argv = [str(exe), *command]
    logger.debug("running %s", " ".join(argv))
    proc = subprocess.run(
        argv,
        capture_output=True,
        text=True,
        cwd=tempfile.gettempdir(),
        check=False,
    )
    if proc.returncode != 0:
        diagnostics = "\n".join(_clean(line) for line in proc.stderr.splitlines()).strip()
        name = command[0] if command else ""
        logger.error("bart %s failed (exit status %d): %s", name, proc.returncode, diagnostics)
        raise BartError(
            f"BART was not successful (exit status {proc.returncode})",
            diagnostics=diagnostics,
            returncode=proc.returncode,
        )
    return proc


def _forward_output(stdout: str, output_consumer: Optional[OutputConsumer]) -> None:
    for line in stdout.splitlines():
        line = _clean(line)
        if output_consumer is not None:
            output_consumer(line.strip())
        else:
            logger.info("%s", line)


@with_temp_files
def execute(
    temp_files: list,
    *args: Any,
    output_consumer: Optional[OutputConsumer] = None,
    executable: Optional[str] = None,
) -> None:
    """
    Run a BART command.

    Parameters
    ----------
    *args : Any
        Command name and its arguments.
    output_consumer : Optional[Callable[[str], Any]]
        Receives each line of standard output. If omitted, output is logged
        at INFO level.
    executable : Optional[str]
        Explicit BART executable; see `find_bart_executable`.

    Raises
    ------
    BartError
        If BART cannot be started or exits with a non-zero status. The
        toolkit's diagnostic text is attached.

    Examples
    --------
    >>> execute("fft", "-u", 7, kspace, "/tmp/image.ra")  # doctest: +SKIP
    """
    proc = _invoke(convert_arguments(args, temp_files), executable)
    _forward_output(proc.stdout, output_consumer)


@with_temp_files
def read(temp_files: list, *args: Any, executable: Optional[str] = None) -> str:
    """
    Run a BART command and return its standard output, stripped.

    Examples
    --------
    >>> read("bitmask", "-b", 7)  # doctest: +SKIP
    '0 1 2'
    """
    proc = _invoke(convert_arguments(args, temp_files), executable)
    return "\n".join(_clean(line) for line in proc.stdout.splitlines()).strip()


@with_temp_files
def run(
    temp_files: list,
    *args: Any,
    output_consumer: Optional[OutputConsumer] = None,
    executable: Optional[str] = None,
) -> ComplexFloatNDArray:
    """
    Run a BART command that writes one output array, and load that array.

    The output file argument is appended automatically and must be omitted
    from `args`. The result's axes are labeled with the first `ndim`
    `BartDims` slots.

    Examples
    --------
    >>> magnitude = run("cabs", image).squeeze()  # doctest: +SKIP
    """
    fd, name = tempfile.mkstemp(prefix="bart_", suffix=".ra")
    os.close(fd)
    output = Path(name)
    temp_files.append(output)
    command = convert_arguments(args, temp_files) + [str(output)]
    proc = _invoke(command, executable)
    _forward_output(proc.stdout, output_consumer)
    result = load(output)
    result.set_bart_dims(*BartDims.first(result.ndim))
    return result
