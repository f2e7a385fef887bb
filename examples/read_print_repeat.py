"""Repeatedly reads from ./my_pipe and prints each message.

    $ python examples/read_print_repeat.py &
    Waiting for message...
    $ printf "something" > my_pipe
    Received message: something
    Waiting for message...
"""

from fifo_bridge import NamedPipePath, setup_logging


def main():
    setup_logging()
    pipe = NamedPipePath("./my_pipe")
    reader = pipe.open_read()
    try:
        while True:
            reader.ensure_pipe_exists()
            print("Waiting for message...")
            print(f"Received message: {reader.read_string()}")
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
