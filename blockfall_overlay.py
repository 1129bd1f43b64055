import pygame
from blockfall_config import CONFIG

class Overlay:
    def __init__(self):
        self.active=False
        self.items=[
            ("CELL_SIZE","Cell size",12,40,2),
            ("TICK_MS","Tick ms",100,2000,50),
            ("AUTO_RESET","Auto reset",False,True,None),
        ]
        self.index=0

    def toggle(self): self.active=not self.active

    def handle(self,e):
        """Returns the config key that changed, if any."""
        if e.key in (pygame.K_ESCAPE,pygame.K_F1): self.toggle(); return None
        if e.key==pygame.K_UP: self.index=(self.index-1)%len(self.items); return None
        if e.key==pygame.K_DOWN: self.index=(self.index+1)%len(self.items); return None
        key,label,lo,hi,step=self.items[self.index]
        val=CONFIG[key]
        if isinstance(lo,bool):
            if e.key in (pygame.K_RETURN,pygame.K_LEFT,pygame.K_RIGHT): CONFIG[key]=not val
        else:
            if e.key==pygame.K_LEFT: CONFIG[key]=max(lo,val-step)
            if e.key==pygame.K_RIGHT: CONFIG[key]=min(hi,val+step)
        return key if CONFIG[key]!=val else None

    def draw(self,screen,font,w,h):
        if not self.active: return
        s=pygame.Surface((w-40,h-80),pygame.SRCALPHA); s.fill((20,20,20,230))
        screen.blit(s,(20,40))
        y=60
        for i,(key,label,lo,hi,step) in enumerate(self.items):
            col=(255,255,255) if i==self.index else (170,170,170)
            screen.blit(font.render(f"{label}: {CONFIG[key]}",True,col),(36,40+y)); y+=30
