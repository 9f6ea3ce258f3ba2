import typing as t

# Interpreter recursion limit requested by the recursive solver
RECURSION_LIMIT = 10000

# Frames kept free for the caller when deciding whether a maze fits the recursion limit
RECURSION_MARGIN = 200

DEFAULT_EXECUTION: t.Literal["recursive", "iterative"] = "recursive"

WAIT_FOR_KEYPRESS = True

VERBOSE = False
