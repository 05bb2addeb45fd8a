"""Keyboard bindings: pygame KEYDOWN -> engine Command"""
from typing import Optional
import pygame
from tetris_engine import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.PAUSE,
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_r: Command.START,
}

# only START is honoured while no game is in progress
GAMEPLAY = {Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.SOFT_DROP,
            Command.ROTATE, Command.HARD_DROP, Command.PAUSE}

def command_for(event) -> Optional[Command]:
    if event.type != pygame.KEYDOWN: return None
    return KEYMAP.get(event.key)

def allowed(command: Command, in_progress: bool) -> bool:
    return in_progress or command not in GAMEPLAY
