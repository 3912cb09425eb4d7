"""
Run with: python -m desktopcalc
"""
from desktopcalc.main import main

if __name__ == "__main__":
    main()
