from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, NoReturn, Optional, Sequence

from catpath.constants import JSON_LOGS_ENV, PROG_NAME
from catpath.core.builder import PathListBuilder
from catpath.core.exceptions import CatPathError
from catpath.core.interfaces.fs import DirectoryCheckerProtocol
from catpath.core.interfaces.logging import LoggerFactoryProtocol, LoggerLikeProtocol
from catpath.fs.checker import DirectoryChecker
from catpath.logging.factory import DefaultLoggerFactory
from catpath.logging.helpers import get_logger
from catpath.parsing.parser import parse_command
from catpath.parsing.tokenize import tokenize_arguments
from catpath.rendering.output import render_help, render_path_list

logger: LoggerLikeProtocol = get_logger('catpath')


def _prog_name(argv0: Optional[str] = None) -> str:
    """Return the base name used in usage text and error prefixes."""
    name = os.path.basename(argv0 if argv0 is not None else (sys.argv[0] if sys.argv else ''))
    if not name or name == '__main__.py':
        return PROG_NAME
    return name


def _configure_logging(
    *,
    json_logs: bool,
    verbose: bool,
    prog: str,
    factory: Optional[LoggerFactoryProtocol] = None,
) -> LoggerFactoryProtocol:
    """Configure logging for this invocation and return the factory in use.

    A caller-supplied *factory* is used as-is; otherwise the default one is
    built from the -v/--json-logs switches.
    """
    if factory is None:
        level = logging.DEBUG if verbose else logging.WARNING
        factory = DefaultLoggerFactory(json_logs=json_logs, level=level, prog=prog)
    global logger
    logger = factory.get_logger('catpath')
    return factory


class CatPath:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        prog: str = PROG_NAME,
        environ: Optional[Mapping[str, str]] = None,
        checker: Optional[DirectoryCheckerProtocol] = None,
        logger_factory: Optional[LoggerFactoryProtocol] = None,
    ) -> str:
        """Run the tool with an argv tail and return the text for stdout.

        Raises `CatPathError` subclasses for user-facing failures; nothing is
        printed here so a failed run produces no partial output.
        """
        env = environ if environ is not None else os.environ
        cmd = parse_command(argv, prog=prog)
        factory = _configure_logging(
            json_logs=cmd.json_logs or env.get(JSON_LOGS_ENV) == '1',
            verbose=cmd.verbose,
            prog=prog,
            factory=logger_factory,
        )

        if cmd.args.help:
            return render_help(prog)

        tokens = tokenize_arguments(cmd.paths, cmd.args.separator)
        logger.debug('%d path(s) from %d argument(s)', len(tokens), len(cmd.paths))
        builder = PathListBuilder(
            cmd.args,
            checker=checker or DirectoryChecker(logger=factory.get_logger('fs')),
            environ=env,
            logger=factory.get_logger('builder'),
        )
        return render_path_list(builder.build(tokens))


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `catpath` script and `python -m catpath`."""
    prog = _prog_name()
    args = list(sys.argv[1:] if argv is None else argv)
    _configure_logging(json_logs=os.getenv(JSON_LOGS_ENV) == '1', verbose=False, prog=prog)
    try:
        out = CatPath.run(args, prog=prog)
        sys.stdout.write(out)
        sys.stdout.flush()
        raise SystemExit(0)
    except CatPathError as exc:
        logger.error('%s', exc.message)
        raise SystemExit(1)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Exception encountered: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
