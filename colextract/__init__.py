"""
colextract - column extraction for text files

Prints selected columns, by number or range, from each line of the given files or standard input.
"""

__version__ = "1.0.0"

__all__ = ["main"]


def main(command_line_args=None):
    """Main entry point for the colextract command"""
    from colextract.cli import main as cli_main

    return cli_main(command_line_args)


if __name__ == "__main__":
    main()
