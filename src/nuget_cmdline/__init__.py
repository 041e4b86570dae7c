"""nuget-cmdline — command-line tokenizer and option-binding engine.

Turns a raw argument list into a typed command object: resolves the
command name, binds ``/Name`` and ``-Name`` options to declared fields,
and collects positional arguments.
"""

from nuget_cmdline.version import __version__

__all__: list[str] = ["__version__"]
