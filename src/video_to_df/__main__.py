import sys

from video_to_df.cli import main


if __name__ == "__main__":
    sys.exit(main())
