import sys
import argparse


def parse_command_line_arguments(
  argv : list = None,
) -> argparse.Namespace:
  """
  Parse command-line arguments for the acceleration partials driver.

  Input:
  ------
    argv : list, optional
      Argument list. Reads from sys.argv if None.

  Output:
  -------
    args : argparse.Namespace
      Parsed command-line arguments.
  """
  parser = argparse.ArgumentParser(
    description     = 'Aerodynamic acceleration partials for orbit determination',
    formatter_class = argparse.RawDescriptionHelpFormatter,
  )

  # If no arguments provided, print help and exit
  if argv is None and len(sys.argv) == 1:
    parser.print_help(sys.stderr)
    sys.exit(1)

  parser.add_argument(
    'config_filepath',
    type = str,
    help = 'Scenario YAML file (see data/example_scenario.yaml).',
  )
  parser.add_argument(
    '--time',
    dest    = 'time',
    type    = float,
    default = None,
    help    = 'Evaluation time [s]. Overrides partials.time__s of the scenario file.',
  )
  parser.add_argument(
    '--log-filepath',
    '--log',
    dest    = 'log_filepath',
    type    = str,
    default = None,
    help    = 'Also write terminal output to this file.',
  )
  parser.add_argument(
    '--verify',
    dest    = 'verify',
    action  = 'store_true',
    default = False,
    help    = 'Compare state partials against a second evaluation with scaled perturbations (disabled by default).',
  )

  return parser.parse_args(argv)
