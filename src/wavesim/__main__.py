"""
Run with: python -m wavesim
"""
from wavesim.main import main

if __name__ == "__main__":
    main()
