"""Run the interactive Doppler simulator."""
import sys
from PyQt6 import QtWidgets, QtCore
from doppler_sim.gui.main_window import DopplerWindow


def main():
    # Force English locale so numbers show with a '.' decimal separator
    QtCore.QLocale.setDefault(QtCore.QLocale(QtCore.QLocale.Language.English, QtCore.QLocale.Country.UnitedStates))

    app = QtWidgets.QApplication(sys.argv)
    win = DopplerWindow()
    win.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
