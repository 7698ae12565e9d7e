# main.py
from hiring_hub.main import main


if __name__ == "__main__":
    main()
