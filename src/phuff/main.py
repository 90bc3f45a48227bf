import time

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.traceback import install

from .coder import HuffmanCoder
from .counter import count_characters
from .errors import HuffmanError
from .log import configure_logging
from .tree import HuffmanTree

console = Console()
install(show_locals=True)

app = typer.Typer(help="Huffman coding of text messages")


def _fail(e: HuffmanError) -> typer.Exit:
    console.print(f"[bold red]{type(e).__name__}:[/] {escape(str(e))}")
    return typer.Exit(e.exit_code)


# Entries look like CHAR=BITS; the character itself may be "=".
def _parse_codes(entries: list[str]) -> dict[str, str]:
    codes: dict[str, str] = {}
    for entry in entries:
        character, separator, bits = entry.rpartition("=")
        if not separator:
            raise typer.BadParameter(f"{entry!r} is not of the form CHAR=BITS")
        codes[character] = bits
    return codes


@app.command()
def encode(
    message: str = typer.Argument(..., help="Text to encode"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    try:
        st = time.perf_counter()
        encoded = HuffmanCoder(is_logging=logging).encode(message)
    except HuffmanError as e:
        raise _fail(e)

    if logging:
        dt = time.perf_counter() - st
        console.print(f"Encoding time: {dt:.3f} sec")

    table = Table(title="Code table")
    table.add_column("Character")
    table.add_column("Code")
    for character, code in sorted(encoded.codes.items(), key=lambda x: (len(x[1]), x[1])):
        table.add_row(escape(repr(character)), code)
    console.print(table)
    console.print(f"Packed: {encoded.packed.hex()}")
    console.print(f"Bit length: {encoded.bit_length} (padding: {encoded.padding})")


@app.command()
def decode(
    packed: str = typer.Argument(..., help="Packed bytes as hex"),
    code: list[str] = typer.Option(..., "-c", "--code", help="Code table entry as CHAR=BITS (repeatable)"),
    bit_length: int | None = typer.Option(
        None, "-n", "--bit-length", help="Number of real code bits (padding excluded)"
    ),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    try:
        data = bytes.fromhex(packed)
    except ValueError:
        raise typer.BadParameter(f"{packed!r} is not a hex string", param_hint="PACKED")

    try:
        text = HuffmanCoder(is_logging=logging).decode(data, _parse_codes(code), bit_length)
    except HuffmanError as e:
        raise _fail(e)
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


@app.command()
def tree(
    message: str = typer.Argument(..., help="Text to build the tree from"),
    logging: bool = typer.Option(False, "-l", "--logging", help="Enable logging"),
) -> None:
    configure_logging(logging)
    try:
        huffman_tree = HuffmanTree.from_frequencies(count_characters(message))
    except HuffmanError as e:
        raise _fail(e)
    huffman_tree.print()
    console.print(f"Weighted path length: {huffman_tree.weighted_path_length()}")


if __name__ == "__main__":
    app()
