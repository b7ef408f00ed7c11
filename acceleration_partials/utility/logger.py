"""
Logger Utility
==============

Mirrors terminal output (stdout and stderr) of a partials run into a log file.
"""
import sys

from contextlib import contextmanager
from datetime   import datetime
from pathlib    import Path
from typing     import Iterator, Optional, TextIO


class TeeStream:
  """
  A stream that writes to a terminal stream and a shared log file.
  """
  def __init__(
    self,
    terminal : TextIO,
    log_file : TextIO,
  ):
    self.terminal = terminal
    self.log_file = log_file

  def write(
    self,
    message : str,
  ) -> int:
    self.terminal.write(message)
    self.log_file.write(message)
    self.log_file.flush()
    return len(message)

  def flush(
    self,
  ) -> None:
    self.terminal.flush()
    self.log_file.flush()


class LoggerContext:
  """
  Context to hold logger state for cleanup.
  """
  def __init__(
    self,
    log_file        : TextIO,
    original_stdout : TextIO,
    original_stderr : TextIO,
  ):
    self.log_file        = log_file
    self.original_stdout = original_stdout
    self.original_stderr = original_stderr


def start_logging(
  log_filepath : Path,
) -> LoggerContext:
  """
  Start logging terminal output (stdout and stderr) to a file.

  Input:
  ------
    log_filepath : Path
      Path to the log file. Parent folders are created if needed.

  Output:
  -------
    context : LoggerContext
      Context object for cleanup.
  """
  log_filepath = Path(log_filepath)
  log_filepath.parent.mkdir(parents=True, exist_ok=True)

  # One file handle shared by both streams keeps the output ordered
  log_file = open(log_filepath, 'w')
  log_file.write(f"# Acceleration partials log, started {datetime.now().isoformat(timespec='seconds')}\n")

  context = LoggerContext(
    log_file        = log_file,
    original_stdout = sys.stdout,
    original_stderr = sys.stderr,
  )

  sys.stdout = TeeStream(sys.stdout, log_file)
  sys.stderr = TeeStream(sys.stderr, log_file)

  return context


def stop_logging(
  context : Optional[LoggerContext],
) -> None:
  """
  Stop logging and restore original stdout/stderr.

  Input:
  ------
    context : LoggerContext | None
      Context object from start_logging. None is a no-op.

  Output:
  -------
    None
  """
  if context is None:
    return

  # Restore original streams
  sys.stdout = context.original_stdout
  sys.stderr = context.original_stderr

  # Close log file
  context.log_file.close()


@contextmanager
def logging_to_file(
  log_filepath : Optional[Path],
) -> Iterator[Optional[LoggerContext]]:
  """
  Log terminal output to log_filepath for the duration of the block; no-op if None.
  """
  context = start_logging(log_filepath) if log_filepath is not None else None
  try:
    yield context
  finally:
    stop_logging(context)
