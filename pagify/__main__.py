"""Launch the dataset browser with ``streamlit run``."""

import sys

from streamlit.web import cli as stcli

from pagify.config import ROOT_DIR


def main() -> int:
    sys.argv = ["streamlit", "run", str(ROOT_DIR / "app.py"), *sys.argv[1:]]
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
