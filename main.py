"""Compile a flight route list into CSV. See `route_csv.cli` for usage."""

from route_csv.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
