from godep.cli import cli


def main():
    """Entry point for ``python -m godep``"""
    cli(prog_name="godep")


if __name__ == "__main__":
    main()
