import sys

from rich.pretty import pprint

from quiver import *

__prog__ = "tmsu"


class Tag(Command):
    name = CommandName("tag")
    synopsis = "tag [OPTION]... FILE TAG[=VALUE]..."
    description = "Tags the file FILE with the TAGs specified."
    options = Options([
        Option("-a", "--all", "apply to all files"),
        Option("-r", "--recursive", "recursively apply tags to directory contents"),
    ])

    def execute(self, options, args, /):
        if not args:
            raise ExecutionError("too few arguments", hint="try 'tmsu help tag'")
        pprint({"options": options, "args": args})


if __name__ == '__main__':
    tag = audit(Tag(), shell=True, colorful=True)
    tokens = sys.argv[1:] or ["-v", "--all", "--bogus", "tralala.mp3", "mp3"]
    resolved = [option for token in tokens if (option := lookup_option(tag, token))]
    try:
        tag.execute(Options(resolved), [token for token in tokens if not token.startswith("-")])
    except ExecutionError as error:
        trigger(error, shell=True, colorful=True, command=tag)
