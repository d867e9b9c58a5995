from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

PASSMARK = '[' + colored("✓", "green") + ']'
FAILMARK = '[' + colored("✗", "red") + ']'
WARNMARK = '[' + colored("?", "yellow") + ']'
INFOMARK = '[' + colored("i", "blue") + ']'

# Width of the uncoloured prefix, used to indent continuation lines
_PREFIX_WIDTH = len('[✓]')


def _message(prefix: str, *args) -> None:
    msg = '\n'.join(str(arg) for arg in args)
    lines = msg.split('\n')
    print(f"{prefix} {lines[0]}")
    for line in lines[1:]:
        print(f"{' ' * _PREFIX_WIDTH} {line}")

# Failed contracts and fatal errors
def error(*msg) -> None: _message(FAILMARK, *msg)

# Contracts that warned
def warning(*msg) -> None: _message(WARNMARK, *msg)

def info(*msg) -> None: _message(INFOMARK, *msg)

# Passed contracts
def success(*msg) -> None: _message(PASSMARK, *msg)
