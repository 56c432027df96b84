#!/usr/bin/env python3
'''
Hide messages into PNG files as extra chunks.

 $ pngme.py encode image.png ruSt 'secret message'
 $ pngme.py decode image.png ruSt
 $ pngme.py remove image.png ruSt
 $ pngme.py print image.png
'''
import logging
import os
import sys

from pngchunks.commands import main


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)


if __name__ == '__main__':
    sys.exit(main(sys.argv))
