import tkinter as tk
from tkinter import messagebox, filedialog
import logging

import config
from catalog import CatalogError, load_catalog
from components import OrbitalCanvas, CreateToolTip
from engine import OrbitalEngine
from logging_config import setup_logging
from utils import calculate_metric
from PIL import ImageGrab

logger = logging.getLogger(f"{config.LOGGER_NAME}.app")


class OrbitalApp:
    def __init__(self, root, areas=None):
        self.root = root
        self.root.title("Life Orbits")
        self.root.geometry("1400x900")

        # --- Backend Data ---
        self.engine = OrbitalEngine(areas)

        # --- Control State ---
        self.speed_var = tk.DoubleVar(value=self.engine.sim.orbit_speed)
        self.radius_var = tk.DoubleVar(value=self.engine.sim.radius_scale)
        self.collisions_var = tk.BooleanVar(value=False)

        self.setup_ui()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

    def setup_ui(self):
        # Toolbar
        toolbar_frame = tk.Frame(self.root, bd=1, relief=tk.RAISED)
        toolbar_frame.pack(side=tk.TOP, fill=tk.X)
        self.build_toolbar(toolbar_frame)

        # Footer Status
        self.status_label = tk.Label(self.root, text="", bd=1, relief=tk.SUNKEN, anchor=tk.W)
        self.status_label.pack(side=tk.BOTTOM, fill=tk.X)

        # Main Layout
        self.main_container = tk.Frame(self.root)
        self.main_container.pack(fill=tk.BOTH, expand=True)

        # Dashboard Sidebar
        self.dashboard_frame = tk.Frame(self.main_container, width=350, bg="#f0f0f0", bd=1, relief=tk.SUNKEN)
        self.dashboard_frame.pack(side=tk.RIGHT, fill=tk.Y)
        self.dashboard_frame.pack_propagate(False)

        tk.Label(self.dashboard_frame, text="Life Areas", font=("Arial", 14, "bold"), bg="#4a4a4a", fg="white", pady=8).pack(fill=tk.X)

        self.inspector_frame = tk.Frame(self.dashboard_frame, bg="#fff8e1", bd=2, relief=tk.GROOVE)
        self.inspector_frame.pack(fill=tk.X, padx=5, pady=5)

        self.stats_container = tk.Frame(self.dashboard_frame, bg="#f0f0f0")
        self.stats_container.pack(fill=tk.BOTH, expand=True)

        self.build_canvas()

    def build_canvas(self):
        self.view = OrbitalCanvas(self.main_container, self.engine,
                                  on_select=lambda _: self.rebuild_dashboard(),
                                  on_tick=self.update_status)
        self.view.show_collisions = self.collisions_var.get()
        self.rebuild_dashboard()
        self.view.start()

    # --- UI Components ---

    def build_toolbar(self, parent):
        r1 = tk.Frame(parent)
        r1.pack(fill=tk.X, pady=2)

        # Orbit Speed
        lo, hi, step = config.ORBIT_SPEED_SLIDER
        tk.Label(r1, text="Orbit Speed").pack(side=tk.LEFT, padx=(8, 2))
        speed = tk.Scale(r1, from_=lo, to=hi, resolution=step, orient=tk.HORIZONTAL, length=160,
                         variable=self.speed_var, command=self.on_speed_change)
        speed.pack(side=tk.LEFT)
        CreateToolTip(speed, text="How far the orbit phase advances every tick.")

        # Radius Scale
        lo, hi, step = config.RADIUS_SCALE_SLIDER
        tk.Label(r1, text="Radius Scale").pack(side=tk.LEFT, padx=(12, 2))
        radius = tk.Scale(r1, from_=lo, to=hi, resolution=step, orient=tk.HORIZONTAL, length=160,
                          variable=self.radius_var, command=self.on_radius_change)
        radius.pack(side=tk.LEFT)
        CreateToolTip(radius, text="Stretches or shrinks every orbit around the center.")

        tk.Frame(r1, width=10).pack(side=tk.LEFT)
        self.pause_btn = tk.Button(r1, text="⏸ Pause", command=self.toggle_pause, width=10, font=("Arial", 9, "bold"))
        self.pause_btn.pack(side=tk.LEFT, padx=4)
        tk.Button(r1, text="⟲ Reset", command=self.reset_positions, bg="#bbdefb").pack(side=tk.LEFT, padx=4)
        tk.Checkbutton(r1, text="Show Collisions", variable=self.collisions_var,
                       command=self.toggle_collisions).pack(side=tk.LEFT, padx=8)

        # File Ops
        tk.Label(r1, text="| Disk:", fg="#888").pack(side=tk.LEFT, padx=5)
        tk.Button(r1, text="Open Catalog", command=self.load_from_json).pack(side=tk.LEFT, padx=2)
        tk.Button(r1, text="📷 Save as Image", command=self.export_as_image, bg="#e0e0e0").pack(side=tk.LEFT, padx=2)

    # --- Controls ---

    def on_speed_change(self, value):
        self.engine.set_config(orbit_speed=value)

    def on_radius_change(self, value):
        self.engine.set_config(radius_scale=value)

    def toggle_pause(self):
        paused = self.engine.toggle_pause()
        self.pause_btn.config(text="▶ Resume" if paused else "⏸ Pause")

    def reset_positions(self):
        self.engine.reset()
        self.view.redraw()

    def toggle_collisions(self):
        self.view.show_collisions = self.collisions_var.get()
        self.view.redraw()

    def update_status(self):
        sim = self.engine.sim
        held = self.engine.held_node_id
        state = "Paused" if sim.paused else "Orbiting"
        if held is not None:
            state = f"Holding {self.engine.G.nodes[held]['label']}"
        self.status_label.config(
            text=f"{state} | Speed: {sim.orbit_speed:.3f} | Radius x{sim.radius_scale:.1f} | "
                 f"Phase: {sim.global_angle:.2f} rad | Drag orbs to reposition, click to view details"
        )

    # --- Dashboard ---

    def rebuild_dashboard(self):
        """Refreshes the sidebar. Careful not to duplicate widgets."""
        for w in self.inspector_frame.winfo_children(): w.destroy()
        for w in self.stats_container.winfo_children(): w.destroy()

        G = self.engine.G

        # --- Stats Section ---
        tk.Label(self.stats_container, text="Orbit Statistics", font=("Arial", 14, "bold"), bg="#f0f0f0").pack(fill=tk.X, pady=(10, 5))
        stats_frame = tk.Frame(self.stats_container, bg="white", bd=1, relief=tk.SOLID)
        stats_frame.pack(fill=tk.X, padx=5)

        for name in ["Areas", "Connections", "Avg Energy", "Avg Score", "Most Connected"]:
            tk.Label(stats_frame, text=f"{name}: {calculate_metric(G, name)}", bg="white").pack(anchor="w", padx=5)

        # --- Area List ---
        tk.Label(self.stats_container, text="Areas", font=("Arial", 14, "bold"), bg="#f0f0f0").pack(fill=tk.X, pady=(15, 2))
        for nid in self.engine.store.ids:
            d = G.nodes[nid]
            af = tk.Frame(self.stats_container, bg="#e0e0e0", bd=1, relief=tk.RAISED)
            af.pack(fill=tk.X, pady=2, padx=5)
            tk.Label(af, bg=d['color'], width=3).pack(side=tk.LEFT, padx=5)
            btn = tk.Button(af, text=d['label'], anchor="w", bg="white", relief=tk.FLAT, font=("Arial", 9),
                            command=lambda n=nid: self.select_area(n))
            btn.pack(side=tk.LEFT, fill=tk.X, expand=True)

        # --- Inspector Section ---
        details = self.engine.details(self.engine.selected_node_id)
        if details is None:
            tk.Label(self.inspector_frame, text="(Click an orb to view details)", bg="#fff8e1", fg="#888").pack(pady=5)
            return

        tk.Label(self.inspector_frame, text="SELECTED AREA", bg="#fff8e1", font=("Arial", 10, "bold")).pack(pady=2)
        tk.Label(self.inspector_frame, text=f"{details['label']}  |  Score {details['score']}/5.0",
                 bg="#fff8e1", fg=details['color'], font=("Arial", 11, "bold")).pack(anchor="w", padx=5)
        tk.Label(self.inspector_frame, text=f"Energy: {details['energy']:.2f}", bg="#fff8e1").pack(anchor="w", padx=5)

        tk.Label(self.inspector_frame, text="Connections:", bg="#fff8e1", font=("Arial", 9, "bold")).pack(anchor="w", padx=5, pady=(5, 0))
        if details['satellites']:
            for label in details['satellites']:
                tk.Label(self.inspector_frame, text=f"• {label}", bg="#fff8e1").pack(anchor="w", padx=15)
        else:
            tk.Label(self.inspector_frame, text="No active connections", bg="#fff8e1", fg="#666", font=("Arial", 8, "italic")).pack(anchor="w", padx=15)

        tk.Label(self.inspector_frame, text="Reflection", bg="#fff8e1", font=("Arial", 9, "bold")).pack(anchor="w", padx=5, pady=(5, 0))
        tk.Label(self.inspector_frame, text=details['reflection'], bg="#fff8e1", justify=tk.LEFT, wraplength=320).pack(anchor="w", padx=5, pady=(0, 5))

    def select_area(self, node_id):
        current = self.engine.selected_node_id
        self.engine.select(None if current == node_id else node_id)
        self.rebuild_dashboard()
        self.view.redraw()

    # --- File Ops ---

    def export_as_image(self):
        fp = filedialog.asksaveasfilename(
            defaultextension=".png",
            filetypes=[("PNG Image", "*.png"), ("All Files", "*.*")],
            title="Save Orbit Image"
        )
        if not fp: return

        try:
            # ImageGrab needs absolute screen coordinates; the window must be visible
            canvas = self.view.canvas
            x = canvas.winfo_rootx()
            y = canvas.winfo_rooty()
            w = canvas.winfo_width()
            h = canvas.winfo_height()

            image = ImageGrab.grab(bbox=(x, y, x+w, y+h))
            image.save(fp)
            messagebox.showinfo("Success", f"Image saved to:\n{fp}")

        except Exception as e:
            logger.error("Image export failed: %s", e)
            messagebox.showerror("Export Error", f"Could not save PNG:\n{str(e)}")

    def load_from_json(self):
        fp = filedialog.askopenfilename(filetypes=[("JSON Catalog", "*.json"), ("All Files", "*.*")])
        if not fp: return

        try:
            areas = load_catalog(fp)
        except CatalogError as e:
            logger.error("Catalog load failed: %s", e)
            messagebox.showerror("Critical Error", f"Failed to load file:\n{str(e)}")
            return

        # Fresh engine for the new catalog; the old canvas and its timer go away together
        sim = self.engine.sim
        self.view.stop()
        self.view.canvas.destroy()
        self.engine = OrbitalEngine(areas)
        self.engine.set_config(orbit_speed=sim.orbit_speed, radius_scale=sim.radius_scale, paused=sim.paused)
        self.build_canvas()
        logger.info("Loaded %d life areas from %s", len(self.engine.store.ids), fp)

    def on_close(self):
        self.view.stop()
        self.root.destroy()


def main(log_level=logging.INFO):
    setup_logging(log_level)
    root = tk.Tk()
    OrbitalApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
