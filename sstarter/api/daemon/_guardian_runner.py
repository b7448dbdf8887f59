"""Guardian process entry point (invoked via subprocess)."""

import sys


def main() -> None:
    """Parse the JSON-encoded DaemonSpec argument and run the guardian."""
    if len(sys.argv) != 2:
        sys.exit(2)

    from ._guardian_main import _guardian_main
    from .DaemonSpec import DaemonSpec

    spec = DaemonSpec.model_validate_json(sys.argv[1])
    sys.exit(_guardian_main(spec))


if __name__ == "__main__":
    main()
