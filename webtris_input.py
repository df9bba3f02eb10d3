"""Input source: keys and panel buttons -> commands"""
from enum import Enum
from typing import Dict, List, Optional
import pygame
from webtris_layout import Dims
from webtris_session import Event, Session

class Command(Enum):
    MOVE_LEFT="move_left"; MOVE_RIGHT="move_right"; SOFT_DROP="soft_drop"
    ROTATE_CW="rotate_cw"; PAUSE="pause"; START="start"; RESET="reset"

KEYMAP: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE_CW,
    pygame.K_p: Command.PAUSE,
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_r: Command.RESET,
}

BUTTON_COMMANDS = {"start": Command.START, "pause": Command.PAUSE, "reset": Command.RESET}

def translate(e, dims: Optional[Dims]=None) -> Optional[Command]:
    if e.type==pygame.KEYDOWN: return KEYMAP.get(e.key)
    if e.type==pygame.MOUSEBUTTONDOWN and e.button==1 and dims is not None:
        for name,rect in dims.buttons.items():
            if rect.collidepoint(e.pos): return BUTTON_COMMANDS[name]
    return None

def dispatch(session: Session, cmd: Command) -> List[Event]:
    if cmd is Command.MOVE_LEFT: return session.move_left()
    if cmd is Command.MOVE_RIGHT: return session.move_right()
    if cmd is Command.SOFT_DROP: return session.soft_drop()
    if cmd is Command.ROTATE_CW: return session.rotate(1)
    if cmd is Command.PAUSE: session.toggle_pause(); return []
    if cmd is Command.START: session.start(); return []
    if cmd is Command.RESET: return session.reset()
    return []
