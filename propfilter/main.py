from propfilter.core.application import main

__all__ = ["run"]


def run():
    """Console script entry point."""
    main()


if __name__ == "__main__":
    run()
