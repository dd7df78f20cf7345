"""
python -m flagpole [arguments...]

Small demonstration of the package: registers a few arguments, prints the
usage banner on --help/-h, and otherwise shows how every registered argument
resolved against the command line.
"""
from rich.pretty import pprint

from . import parse
from .utils import Unset


def main(argv=Unset):
    context = parse(argv, usage="[arguments...]", shell=True, colorful=True)
    context.register("help", "h", descr="show this message")
    context.register("output", "o", descr="where to write", default="out.txt", expects=True)
    context.register("mode", "m", descr="how to write", values=("append", "truncate"), expects=True)
    context.register("verbose", descr="chatty output")

    if context.using("help"):
        context.print_usage()
        return 0

    pprint({
        argument.name: {
            "using": context.using(argument.name),
            "value": context.value(argument.name) or argument.default,
        }
        for argument in context.registry
    })
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
