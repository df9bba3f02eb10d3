
import pygame
from webtris_layout import Dims
from webtris_session import RunState, Snapshot

class Overlay:
    """Centered banner over the board for idle / paused / game over."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims=dims; self.font=font; self.big_font=big_font

    def lines(self, snap: Snapshot):
        if snap.state is RunState.IDLE:
            return [("WEBTRIS",True),("Enter or Start to play",False)]
        if snap.state is RunState.PAUSED:
            return [("PAUSED",True),("P to resume",False)]
        if snap.state is RunState.OVER:
            return [("GAME OVER",True),(f"Score: {snap.score}",False),("R to restart",False)]
        return []

    def draw(self,screen,snap: Snapshot):
        lines=self.lines(snap)
        if not lines: return
        d=self.dims
        s=pygame.Surface((d.board_w,d.board_h),pygame.SRCALPHA); s.fill((20,25,40,200))
        screen.blit(s,(d.board_x,d.board_y))
        cx=d.board_x+d.board_w//2
        y=d.board_y+d.board_h//2-20*len(lines)
        for text,big in lines:
            f=self.big_font if big else self.font
            surf=f.render(text,True,(230,240,255))
            screen.blit(surf,surf.get_rect(center=(cx,y))); y+=40 if big else 26
