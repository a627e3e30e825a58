# zzz/__main__.py
# Allow `python -m zzz`

from .cli.app import app


def main() -> None:
    app(prog_name="zzz")


if __name__ == "__main__":
    main()
