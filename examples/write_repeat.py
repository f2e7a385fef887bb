"""Repeatedly writes the given string (or "Hello world!") to ./my_pipe.

    $ python examples/write_repeat.py blub &
    $ cat my_pipe
    blub
    $ cat my_pipe
    blub
"""

import sys

from fifo_bridge import NamedPipePath, setup_logging


def main():
    setup_logging()
    text = (sys.argv[1] if len(sys.argv) > 1 else "Hello world!") + "\n"
    print(f"Writing string: {text}", end="")

    writer = NamedPipePath("./my_pipe").open_write()
    try:
        while True:
            writer.ensure_pipe_exists()
            print("Waiting for receiver...")
            writer.write_str(text)
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
