from typed_envs import EnvVarFactory

envs = EnvVarFactory("LOGGING_DELEGATE")

# These envs set the process-wide defaults used by any delegate constructed without an explicit config

PREFIX = envs.create_env("PREFIX", str, default="", verbose=False)
"""str: A prefix prepended to every category.

A "." separator is inserted unless the prefix already ends with one.

Examples:
    To put every delegate category under `audit`:

    .. code-block:: bash

        export LOGGING_DELEGATE_PREFIX=audit

See Also:
    :func:`POSTFIX` for decorating the end of the category.
"""

POSTFIX = envs.create_env("POSTFIX", str, default="", verbose=False)
"""str: A postfix appended verbatim to every category.

Examples:
    .. code-block:: bash

        export LOGGING_DELEGATE_POSTFIX=.slow
"""

ROOT = envs.create_env("ROOT", str, default="", verbose=False)
"""str: The name of a root logger every delegate category is nested under.

Unlike :func:`PREFIX`, this does not change the category a delegate reports,
only the name of the :class:`logging.Logger` obtained for it.
"""

STYLE = envs.create_env("STYLE", str, default="{", verbose=False)
"""str: The placeholder style used by delegate emission helpers.

Use ``{`` for positional ``{}`` placeholders or ``%`` for the native
:mod:`logging` printf style.
"""
