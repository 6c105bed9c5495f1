#!/usr/bin/env python3
"""Entry point for Proto GUI"""
import argparse
import tkinter as tk
from protoc_gui.compiler.process_runner import PROTOC_EXECUTABLE
from protoc_gui.gui.main_window import ProtocGUI

def main():
    parser = argparse.ArgumentParser(description="Protocol Buffer compiler GUI")
    parser.add_argument("--protoc", type=str, default=PROTOC_EXECUTABLE, help="protoc executable (default: found on PATH)")
    args = parser.parse_args()

    root = tk.Tk()
    app = ProtocGUI(root, protoc=args.protoc)
    root.mainloop()

if __name__ == "__main__":
    main()
