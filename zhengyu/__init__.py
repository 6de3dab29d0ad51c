import os

# Get the base directory of the project (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Path to the data directory (assumes 'data' is at the same level as 'zhengyu')
DATA_DIR = os.path.join(BASE_DIR, '..', 'data')

DICTIONARIES_DIR = os.path.abspath(os.path.join(DATA_DIR, 'dictionaries'))

# LSHK Cantonese-Jyutping character table
JYUTPING_TABLE_URL = "https://cdn.jsdelivr.net/gh/lshk-org/jyutping-table/list.tsv"
JYUTPING_TABLE_PATH = os.path.join(DICTIONARIES_DIR, 'list.tsv')
