import sys

from news_trends_text.cli import main

sys.exit(main())
