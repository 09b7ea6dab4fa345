#apps\main.py
"""
アプリケーションのエントリポイント。
このファイルは"薄く"保つ。起動パラメータの解釈以降は core に任せる。
"""
from file_launcher.core import main


if __name__ == "__main__":
    main()
