# `input` is the key-handling module, reached as ui.input; it shadows the builtin
# only inside this package namespace.
from hyprwiki.ui import input, screen  # noqa: F401
