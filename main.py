# main.py - run the spell checker from a source checkout
# python main.py <dictionary file> <file to be checked>

from adaptive_speller.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
