# python -m phrase_trie

import sys

from phrase_trie.cli import main

if __name__ == "__main__":
    sys.exit(main())
