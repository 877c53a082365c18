#!/usr/bin/env python
"""
Django administration utility.

Standard idiomatic Django usage:

    DJANGO_SETTINGS_MODULE=gradeposting.envs.common ./manage.py COMMAND ARGS...

Short form, selecting a module under gradeposting.envs:

    ./manage.py --settings=test COMMAND ARGS...
"""

import os
import sys
from argparse import ArgumentParser


def main():
    """
    Call the management command.

    Convert a bare ``--settings=<name>`` into a module under gradeposting.envs.
    """
    parse_settings_module = ArgumentParser(add_help=False)
    parse_settings_module.add_argument(
        '--settings',
        help="Which django settings module to use under gradeposting.envs.",
    )
    settings_args, management_args = parse_settings_module.parse_known_args(sys.argv[1:])

    if settings_args.settings:
        settings_module = settings_args.settings
        if '.' not in settings_module:
            settings_module = f"gradeposting.envs.{settings_module}"
        os.environ["DJANGO_SETTINGS_MODULE"] = settings_module
    else:
        os.environ.setdefault("DJANGO_SETTINGS_MODULE", "gradeposting.envs.common")

    from django.core.management import execute_from_command_line
    execute_from_command_line([sys.argv[0]] + management_args)


if __name__ == "__main__":
    main()
