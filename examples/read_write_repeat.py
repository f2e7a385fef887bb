"""Reads a message from ./reverse_me, reverses it and writes it back.

    $ python examples/read_write_repeat.py &
    $ printf "some string" > reverse_me
    $ cat reverse_me
    gnirts emos
"""

import asyncio

from fifo_bridge import NamedPipePath, setup_logging


async def serve(pipe: NamedPipePath):
    reader = pipe.open_read()
    writer = pipe.open_write()
    while True:
        pipe.ensure_exists()
        print("Waiting for message...")
        msg = await reader.aread_string()

        answer = msg[::-1] + "\n"
        pipe.ensure_exists()
        print("Received message, waiting for receiver...")
        await writer.awrite_str(answer)


def main():
    setup_logging()
    try:
        asyncio.run(serve(NamedPipePath("./reverse_me")))
    except KeyboardInterrupt:
        print("\nStopped.")


if __name__ == "__main__":
    main()
