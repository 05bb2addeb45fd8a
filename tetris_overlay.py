import pygame
from tetris_engine import Phase, Snapshot
from tetris_layout import Dims

class Overlay:
    """Dims the board and shows the start, paused and game-over screens."""
    def __init__(self, font, big_font):
        self.font=font; self.big_font=big_font

    def lines_for(self, snap: Snapshot):
        if snap.phase is Phase.IDLE:
            return [("Tetris",True),("Press Enter to start",False)]
        if snap.phase is Phase.PAUSED:
            return [("Paused",True),("P to resume",False)]
        if snap.phase is Phase.GAME_OVER:
            return [("Game Over!",True),(f"Score: {snap.score}",False),("Enter to play again",False)]
        return []

    def draw(self, screen, dims: Dims, snap: Snapshot):
        lines=self.lines_for(snap)
        if not lines: return
        s=pygame.Surface((dims.board_w,dims.board_h),pygame.SRCALPHA); s.fill((0,0,0,128))
        screen.blit(s,(dims.board_x,dims.board_y))
        cx=dims.board_x+dims.board_w//2
        y=dims.board_y+dims.board_h//2-20*len(lines)
        for text,big in lines:
            surf=(self.big_font if big else self.font).render(text,True,(255,255,255))
            screen.blit(surf,surf.get_rect(center=(cx,y))); y+=44 if big else 28
