# showlog.py — log file writer + optional on-screen log bar with timestamps, levels, auto-tag
import os, sys, time, datetime, threading, queue, traceback
from typing import Optional

import pygame

import config as cfg
from helper import hex_to_rgb

# ---------- Paths & state ----------
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def _resolve_log_file() -> str:
    name = str(getattr(cfg, "LOG_FILE", "ui_log.txt"))
    return name if os.path.isabs(name) else os.path.join(BASE_DIR, name)


LOG_FILE = _resolve_log_file()

font = None
screen_ref = None
log_text = ""     # last text actually shown on screen (short-tagged)
lastmsg  = ""     # last full canonical log line written to file (with [LEVEL module])

# Short tags for the log bar
SHORT_TAGS = {
    "controller": "CTRL",
    "gestures": "GEST",
    "light_panel": "PANEL",
    "event_bus": "BUS",
    "app": "APP",
    "ui": "UI",
    "__main__": "UI",
}

_EMOJI = {"INFO": "🟢", "WARN": "🟠", "ERROR": "🔴", "DEBUG": "⚫", "VERBOSE": "⚪"}


# --- Numeric verbosity: 0=ERROR, 1=WARN, 2=INFO (default) ---
def _log_level() -> int:
    try:
        return int(getattr(cfg, "LOG_LEVEL", 2))
    except (TypeError, ValueError):
        return 2


def _allow_level(level_name: str) -> bool:
    """Filter by numeric LOG_LEVEL (0=error,1=warn,2=info) and the DEBUG/VERBOSE switches."""
    lvl = (level_name or "INFO").upper()
    if lvl == "ERROR":
        return True
    elif lvl == "WARN":
        return _log_level() >= 1
    elif lvl == "INFO":
        return _log_level() >= 2
    elif lvl == "DEBUG":
        return bool(getattr(cfg, "DEBUG_LOG", False))
    elif lvl == "VERBOSE":
        return bool(getattr(cfg, "VERBOSE_LOG", False))
    # treat unknown/custom tags as INFO
    return _log_level() >= 2


# ---------------------------------------------------------------------
# Background file writer for non-blocking logging
# ---------------------------------------------------------------------
_log_queue = queue.Queue(maxsize=int(getattr(cfg, "LOG_QUEUE_SIZE", 512)))
_log_writer = None
_writer_lock = threading.Lock()


def _log_writer_loop():
    """Drain the log queue and write to file."""
    while True:
        msg = _log_queue.get()
        try:
            if msg is None:
                break
            _direct_write_file(msg)
        except OSError as e:
            print(f"[showlog] writer failed: {e}", file=sys.stderr)
        finally:
            _log_queue.task_done()


def _start_log_writer():
    global _log_writer
    with _writer_lock:
        if _log_writer is not None and _log_writer.is_alive():
            return
        _log_writer = threading.Thread(target=_log_writer_loop, name="showlog-writer", daemon=True)
        _log_writer.start()


def shutdown(timeout: float = 1.0):
    """Flush pending lines and stop the writer thread."""
    global _log_writer
    if _log_writer is None:
        return
    try:
        _log_queue.put(None, timeout=timeout)
    except queue.Full:
        return
    _log_writer.join(timeout)
    _log_writer = None


# ---------- helpers ----------
def _timestamp() -> str:
    return datetime.datetime.now().strftime("%H:%M:%S")


def _detect_level(msg: str) -> str:
    t = (msg or "").strip().upper()
    for level in ("ERROR", "WARN", "DEBUG", "VERBOSE", "INFO"):
        if t.startswith(f"[{level}"):
            return level
    return "INFO"


def _direct_write_file(msg: str):
    level = _detect_level(msg)
    line = f"[{_timestamp()}] {_EMOJI.get(level, '🟢')} {msg}"
    with open(LOG_FILE, "a", encoding="utf-8") as f:
        f.write(line + "\n")


def _write_file(msg: str):
    """Enqueue log lines for background writing."""
    _start_log_writer()
    try:
        _log_queue.put_nowait(msg)
    except queue.Full:
        # Drop oldest to keep throughput steady
        try:
            _log_queue.get_nowait()
            _log_queue.task_done()
            _log_queue.put_nowait(msg)
        except (queue.Empty, queue.Full):
            pass


def _caller_module() -> str:
    frame = sys._getframe(1)
    while frame:
        filename = frame.f_code.co_filename
        # stop when we're outside showlog.py
        if not filename.endswith("showlog.py"):
            return os.path.splitext(os.path.basename(filename))[0] or "main"
        frame = frame.f_back
    return "main"


def _short_tag(name: str) -> str:
    if not name:
        return "GEN"
    key = name.lower()
    if not getattr(cfg, "LOG_SHORT_NAMES", True):
        return key.upper()
    return SHORT_TAGS.get(key, key[:5].upper())


def init(screen, font_name=None, font_size=None):
    """Attach the on-screen log bar to a display surface."""
    global font, screen_ref
    screen_ref = screen
    if not pygame.font.get_init():
        pygame.font.init()
    size = int(font_size or getattr(cfg, "LOG_FONT_SIZE", 14))
    font = pygame.font.SysFont(font_name or "couriernew,courier,monospace", size)


def log_process(msg: str):
    """
    Canonicalise a '[LEVEL] text' message into '[LEVEL module] text',
    write it to file and update the on-screen text.
    """
    global log_text, lastmsg
    if getattr(cfg, "LOG_OFF", False):
        return

    level = _detect_level(msg)
    if not _allow_level(level):
        return

    tail = msg.split("]", 1)[1].lstrip() if msg.startswith("[") and "]" in msg else msg
    module_name = _caller_module()
    file_line = f"[{level} {module_name}] {tail}"

    # --- File write (avoid duplicates) ---
    if file_line != lastmsg:
        _write_file(file_line)
        lastmsg = file_line

    log_text = f"[{_short_tag(module_name)}] {tail.splitlines()[0] if tail else ''}"


def draw_bar(screen=None, fps_value=None):
    """
    Draw the bottom log bar with current log_text, clock and optional FPS.
    Called once per frame by the render pipeline when SHOW_LOG_BAR is on.
    """
    global screen_ref

    if screen is not None:
        screen_ref = screen
    else:
        screen = screen_ref
    if not screen or not font:
        return

    log_bar_h = int(getattr(cfg, "LOG_BAR_HEIGHT", 20))
    rect = pygame.Rect(0, screen.get_height() - log_bar_h, screen.get_width(), log_bar_h)
    pygame.draw.rect(screen, hex_to_rgb(getattr(cfg, "LOG_BAR_COLOR", "#0A0A0A")), rect)

    # --- Left: log text ---
    text_color = hex_to_rgb(getattr(cfg, "LOG_TEXT_COLOR", "#FFFFFF"))
    text_surface = font.render(log_text, True, text_color)
    screen.blit(text_surface, (10, rect.top + 2))

    # --- Right: clock (+ FPS) ---
    overlay_text = time.strftime("%H:%M")
    if fps_value is not None:
        overlay_text = f"{overlay_text} | FPS: {int(round(fps_value)):03d}"

    overlay_surf = font.render(overlay_text, True, (180, 180, 180))
    overlay_rect = overlay_surf.get_rect()
    overlay_rect.bottom = rect.bottom - 2
    overlay_rect.right = rect.right - 10
    screen.blit(overlay_surf, overlay_rect)


def _format_exc_str(exc: Optional[BaseException] = None) -> str:
    """
    Return a full traceback string for the current exception context or a given exception.
    Safe to call even if no exception is active (returns empty string).
    """
    if exc is not None:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    exc_type, exc_val, exc_tb = sys.exc_info()
    if exc_val is None:
        return ""
    return "".join(traceback.format_exception(exc_type, exc_val, exc_tb))


# ---------- public log wrappers ----------
def error(msg: Optional[str] = None, exc: Optional[BaseException] = None):
    """
    Log an ERROR. If called inside an exception handler (or with exc=),
    append the full traceback to the message.
    """
    tb = _format_exc_str(exc)
    full = msg if msg else ""
    if tb:
        full = (full + ("\n" if full else "") + tb).rstrip()
    log_process(f"[ERROR] {full}")


def debug(message):
    """Extra-detailed debug messages (file only unless DEBUG_LOG)."""
    log_process(f"[DEBUG] {message}")


def info(message):
    log_process(f"[INFO] {message}")


def warn(message):
    log_process(f"[WARN] {message}")


def verbose(message):
    if not getattr(cfg, "VERBOSE_LOG", False):
        return
    log_process(f"[VERBOSE] {message}")


# Deliver anything config queued before logging was importable
cfg._notify_showlog_ready()
