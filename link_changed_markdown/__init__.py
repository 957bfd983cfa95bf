"""Keep one PR comment listing the Markdown files a pull request changes."""

__version__ = "0.1.0"
