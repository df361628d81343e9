import sys
from PyQt6 import QtWidgets

from .config import APP_TITLE
from .log import setup_logging
from .ui.main_window import MainWindow
if sys.platform == "win32":
    try:
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(
            "SkinBuilder.App")
    except (AttributeError, OSError):
        pass


def main() -> int:
    setup_logging()
    app = QtWidgets.QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
