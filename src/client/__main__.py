import sys

from src.client.cli import main

sys.exit(main())
