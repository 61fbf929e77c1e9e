"""Entry point that starts the zoo game."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence

from zoopark.shell import START_MONEY, ZooShell

STARTUP_LINES: tuple[str, ...] = (
    "А на краншташ уходить моя яхтааа белый парус на кринивв.",
    "Позади меня осталась моя вауухтааа а прамя небо да залиувв.",
    "Я на яхте наделал самбрероооо и стал похож на капитана на Нерооо",
    "Я на яхте наделал самбрероооо и стал похож на капитана на Нерооо",
    "Лиш бы тока не НаБанДерууууу. Я стал похож на капитана Нерооо",
    "",
    "Чтож всё отлично!",
)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="zoopark",
        description="Управление инопланетным зоопарком.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="зерно генератора случайных чисел",
    )
    parser.add_argument(
        "--money",
        type=int,
        default=START_MONEY,
        help="деньги в начале игры",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until the player quits or input ends."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)

    stdin = sys.stdin
    interactive = hasattr(stdin, "isatty") and stdin.isatty()
    shell = ZooShell(
        stdin=None if interactive else stdin,
        stdout=sys.stdout,
        rng=rng,
        start_money=args.money,
    )

    for line in STARTUP_LINES:
        shell.console.write(line)

    try:
        shell.cmdloop()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())