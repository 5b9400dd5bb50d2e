import logging
import tkinter as tk

from edutrack.constants import LOG_LEVEL
from edutrack.ui import AttendanceApp


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    root = tk.Tk()
    app = AttendanceApp(root)
    root.mainloop()

if __name__ == "__main__":
    main()
