# --- utils.py ---

import time
import threading
import json
from colorama import Fore, Style, init
import os

init()

VERBOSE = False
start_time = None

# Lock used for synchronized printing across threads
PRINT_LOCK = threading.Lock()

def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` with a timestamp."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    with PRINT_LOCK:
        print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", flush=True)

def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)

def log_chains_to_file(word, chains):
    """Record the longest chain found for ``word`` in a dated JSON file in the `logs` directory.
    If the file already has an entry for ``word``, it is replaced only when the new chain is longer."""
    logs_dir = os.path.join(os.getcwd(), 'logs')
    os.makedirs(logs_dir, exist_ok=True)
    log_file = os.path.join(logs_dir, f"chains_{time.strftime('%Y-%m-%d')}.json")

    log_data = {"words": {}}
    if os.path.exists(log_file):
        try:
            with open(log_file, 'r') as f:
                log_data = json.load(f)
        except json.JSONDecodeError:
            log_with_time(f"Ignoring unreadable log file {log_file}", color=Fore.YELLOW)
    entries = log_data.setdefault("words", {})

    new_entry = {
        "length": len(chains[0]) if chains else 0,
        "chains": [list(chain) for chain in chains],
    }
    existing = entries.get(word)
    if not existing or new_entry["length"] > existing.get("length", 0):
        entries[word] = new_entry
        log_with_time(f"Updated chains for '{word}' in {log_file}", color=Fore.GREEN)
    else:
        log_with_time(f"Existing chains for '{word}' in {log_file} are as long or longer; not updated.", color=Fore.YELLOW)

    with open(log_file, 'w') as f:
        json.dump(log_data, f, indent=2)
    return log_file
