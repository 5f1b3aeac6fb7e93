# components.py
# Contains custom UI widgets. The OrbitalCanvas is isolated here: it draws whatever the engine
# reports and turns mouse events into engine calls. It never moves an orb by itself.

import tkinter as tk
import math

import config
import highlights
from scheduler import Ticker


class OrbitalCanvas:
    """
    The life-area orbit view.
    Features: Drag Orbs, Click to Select, Pan View (Background Drag), Zoom (Scroll).
    World origin is the orbit center; it starts in the middle of the canvas.
    """
    def __init__(self, parent, engine, on_select=None, on_tick=None, interval_ms=config.TICK_INTERVAL_MS):
        self.engine = engine
        self.on_select = on_select
        self.on_tick = on_tick

        self.zoom = 1.0
        self.offset_x = 0
        self.offset_y = 0
        self.pan_start = None
        self.initialized = False
        self.show_collisions = False

        self.canvas = tk.Canvas(parent, bg=config.BACKGROUND, highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        # Bindings
        self.canvas.bind("<Button-1>", self.on_mouse_down)
        self.canvas.bind("<B1-Motion>", self.on_mouse_drag)
        self.canvas.bind("<ButtonRelease-1>", self.on_mouse_up)
        self.canvas.bind("<Leave>", self.on_leave)

        # Mouse Wheel
        self.canvas.bind("<MouseWheel>", self.on_zoom)
        self.canvas.bind("<Button-4>", lambda e: self.on_zoom(e, 1))
        self.canvas.bind("<Button-5>", lambda e: self.on_zoom(e, -1))

        # Resize event for centering, Destroy to release the timer
        self.canvas.bind("<Configure>", self.on_resize)
        self.canvas.bind("<Destroy>", self.on_destroy)

        self.ticker = Ticker(self.canvas, interval_ms, self.step)

    # --- Simulation Loop ---

    def start(self):
        self.ticker.start()

    def stop(self):
        self.ticker.stop()

    def step(self):
        self.engine.tick()
        self.redraw()
        if self.on_tick:
            self.on_tick()

    def on_destroy(self, event):
        if event.widget is self.canvas:
            self.ticker.stop()

    # --- Coordinate Transforms ---

    def on_resize(self, event):
        if not self.initialized:
            self.offset_x = event.width / 2
            self.offset_y = event.height / 2
            self.initialized = True
        self.redraw()

    def to_screen(self, wx, wy):
        sx = (wx * self.zoom) + self.offset_x
        sy = (wy * self.zoom) + self.offset_y
        return sx, sy

    def to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.zoom
        wy = (sy - self.offset_y) / self.zoom
        return wx, wy

    def on_zoom(self, event, direction=None):
        if direction is None:
            factor = 1.1 if event.delta > 0 else 0.9
        else:
            factor = 1.1 if direction > 0 else 0.9
        self.zoom *= factor
        self.redraw()

    # --- Drawing ---

    def redraw(self):
        self.canvas.delete("all")
        G = self.engine.G
        areas = self.engine.store.ids
        cx, cy = self.to_screen(*self.engine.driver.center)

        # 1. Orbit Rings
        scale = self.engine.sim.radius_scale
        for n in areas:
            ring = G.nodes[n]['orbit_radius'] * scale * self.zoom
            self.canvas.create_oval(cx-ring, cy-ring, cx+ring, cy+ring,
                                    outline=config.ORBIT_RING_COLOR, dash=(4, 4))

        # 2. Highlights (behind everything else)
        groups = highlights.get_selection_highlight(G, self.engine.selected_node_id)
        if self.show_collisions:
            groups += highlights.get_collision_highlights(self.engine.overlapping_pairs())
        self.draw_highlights(groups)

        # 3. Satellites
        for sid, (wx, wy) in self.engine.satellite_positions().items():
            parent = G.nodes[sid]['parent']
            px, py = self.to_screen(*G.nodes[parent]['pos'])
            sx, sy = self.to_screen(wx, wy)
            self.canvas.create_line(px, py, sx, sy, fill=config.SATELLITE_LINE_COLOR, width=2*self.zoom)
            dot = config.SATELLITE_DOT * self.zoom
            self.canvas.create_oval(sx-dot, sy-dot, sx+dot, sy+dot,
                                    fill=G.nodes[parent]['color'], outline="")

        # 4. Orbs
        for n in areas:
            self.draw_orb(n, G.nodes[n])

        # 5. Center Point
        self.canvas.create_oval(cx-6, cy-6, cx+6, cy+6, fill=config.CENTER_COLOR, outline="")

    def draw_highlights(self, groups):
        for h in groups:
            color = h.get('color', 'yellow')
            width = h.get('width', 8) * self.zoom
            G = self.engine.G

            # Halo
            for n in h.get('nodes', []):
                sx, sy = self.to_screen(*G.nodes[n]['pos'])
                rad = G.nodes[n]['footprint_radius'] * self.zoom + (width / 2)
                self.canvas.create_oval(sx-rad, sy-rad, sx+rad, sy+rad, fill=color, outline=color)

            # Glow Lines
            for u, v in h.get('edges', []):
                sx1, sy1 = self.to_screen(*G.nodes[u]['pos'])
                sx2, sy2 = self.to_screen(*G.nodes[v]['pos'])
                if math.hypot(sx2 - sx1, sy2 - sy1) == 0: continue
                self.canvas.create_line(sx1, sy1, sx2, sy2, fill=color, width=width,
                                        capstyle=tk.ROUND, joinstyle=tk.ROUND)

    def draw_orb(self, n, d):
        sx, sy = self.to_screen(*d['pos'])
        selected = n == self.engine.selected_node_id
        held = n == self.engine.held_node_id

        size = config.SELECTED_ORB_SIZE if selected else d['footprint_radius'] * 2
        r = (size / 2) * self.zoom

        # Outline logic
        outline, width = "#ffffff", 1
        if held:
            outline, width = "white", 4
        elif selected:
            outline, width = "orange", 3

        # Energy ring: brighter areas get a wider ring
        glow = r + (4 + 10 * d['energy']) * self.zoom
        self.canvas.create_oval(sx-glow, sy-glow, sx+glow, sy+glow, outline=d['color'],
                                width=max(1, 3 * d['energy'] * self.zoom))
        self.canvas.create_oval(sx-r, sy-r, sx+r, sy+r, fill=d['color'], outline=outline, width=width)

        font_size = max(9, int(10 * self.zoom))
        self.canvas.create_text(sx, sy, text=d['label'], font=("Arial", font_size, "bold"),
                                fill="white", width=max(20, 2 * r - 8))
        if selected:
            self.canvas.create_text(sx, sy + r * 0.55, text=f"{d['score']}/5.0",
                                    font=("Arial", max(8, font_size - 2)), fill="white")

        # Connection count badge
        count = self.engine.G.degree(n)
        if count:
            bx, by = sx + r * 0.75, sy - r * 0.75
            br = 10 * self.zoom
            self.canvas.create_oval(bx-br, by-br, bx+br, by+br, fill="#f28c28", outline="white", width=2)
            self.canvas.create_text(bx, by, text=str(count), fill="white",
                                    font=("Arial", max(7, int(8 * self.zoom)), "bold"))

    # --- Interaction Logic ---

    def on_mouse_down(self, event):
        world = self.to_world(event.x, event.y)
        clicked_node = self.engine.node_at(world)

        if clicked_node is not None:
            self.engine.hold(clicked_node, world)
            self.pan_start = None
        else:
            self.pan_start = (event.x, event.y)

    def on_mouse_drag(self, event):
        if self.engine.held_node_id is not None:
            self.engine.move_held(self.to_world(event.x, event.y))
            self.redraw()
        elif self.pan_start is not None:
            dx = event.x - self.pan_start[0]
            dy = event.y - self.pan_start[1]
            self.offset_x += dx
            self.offset_y += dy
            self.pan_start = (event.x, event.y)
            self.redraw()

    def on_mouse_up(self, event):
        if self.engine.held_node_id is not None:
            before = self.engine.selected_node_id
            self.engine.release()
            if self.engine.selected_node_id != before and self.on_select:
                self.on_select(self.engine.selected_node_id)
            self.redraw()
        self.pan_start = None

    def on_leave(self, event):
        self.engine.cancel_hold()
        self.pan_start = None


class CreateToolTip(object):
    """
    Hover tooltip for a control widget.
    """
    def __init__(self, widget, text='widget info', waittime=500, wraplength=220):
        self.waittime = waittime     # miliseconds
        self.wraplength = wraplength   # pixels
        self.widget = widget
        self.text = text
        self.widget.bind("<Enter>", self.enter)
        self.widget.bind("<Leave>", self.leave)
        self.widget.bind("<ButtonPress>", self.leave)
        self.id = None
        self.tw = None

    def enter(self, event=None):
        self.schedule()

    def leave(self, event=None):
        self.unschedule()
        self.hidetip()

    def schedule(self):
        self.unschedule()
        self.id = self.widget.after(self.waittime, self.showtip)

    def unschedule(self):
        id = self.id
        self.id = None
        if id:
            self.widget.after_cancel(id)

    def showtip(self, event=None):
        x = self.widget.winfo_rootx() + 20
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self.tw = tk.Toplevel(self.widget)
        self.tw.wm_overrideredirect(True)
        self.tw.wm_geometry("+%d+%d" % (x, y))
        tk.Label(self.tw, text=self.text, justify='left', wraplength=self.wraplength,
                 background="#ffffe0", relief='solid', borderwidth=1,
                 font=("tahoma", "8", "normal")).pack(ipadx=1)

    def hidetip(self):
        tw = self.tw
        self.tw = None
        if tw:
            tw.destroy()
