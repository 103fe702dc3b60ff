import customtkinter as ctk
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from services.chart_layout import layout_bar_chart, layout_line_chart
from services.report_service import Report, ReportService
from ui.charts import draw_bar_chart, draw_line_chart, prepare_canvas
from utils.currency import format_currency
from utils.date_helpers import friendly_month

_CHART_DPI = 80


class ReportsTab(ctk.CTkFrame):
    def __init__(self, master, report_service: ReportService, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._svc = report_service
        self._report: Report | None = None

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_summary()
        self._build_charts()
        self._load()

    def refresh(self):
        self._load()

    def _build_summary(self):
        self._summary_frame = ctk.CTkFrame(self, fg_color="transparent")
        self._summary_frame.grid(row=0, column=0, sticky="ew", padx=16, pady=10)
        self._summary_frame.grid_columnconfigure((0, 1), weight=1)

    def _build_charts(self):
        charts = ctk.CTkFrame(self, fg_color="transparent")
        charts.grid(row=1, column=0, sticky="nsew", padx=16, pady=(0, 12))
        charts.grid_columnconfigure((0, 1), weight=1)
        charts.grid_rowconfigure(0, weight=1)

        self._bar_fig, self._bar_ax, self._bar_mpl = self._chart_panel(
            charts, 0, "Spending by Budget Category (this month)"
        )
        self._line_fig, self._line_ax, self._line_mpl = self._chart_panel(
            charts, 1, "Monthly Spending (last 6 months)"
        )

    def _chart_panel(self, parent, column: int, title: str):
        outer = ctk.CTkFrame(parent, fg_color=("gray90", "gray20"), corner_radius=8)
        outer.grid(row=0, column=column, sticky="nsew", padx=(0, 8) if column == 0 else 0)
        ctk.CTkLabel(
            outer, text=title, font=ctk.CTkFont(size=13, weight="bold"),
        ).pack(pady=(10, 0))
        fig = Figure(figsize=(5, 3.5), dpi=_CHART_DPI)
        ax = fig.add_subplot(111)
        mpl = FigureCanvasTkAgg(fig, master=outer)
        widget = mpl.get_tk_widget()
        widget.pack(fill="both", expand=True, padx=8, pady=(4, 10))
        # Geometry depends on pixel size, so lay out again after a resize.
        widget.bind("<Configure>", lambda _e: self.after_idle(self._redraw), add="+")
        return fig, ax, mpl

    def _load(self):
        report = self._svc.load_report()
        if report is None:
            return
        self._report = report

        for w in self._summary_frame.winfo_children():
            w.destroy()
        for i, (label, value) in enumerate([
            (f"Spent in {friendly_month(report.month)}", report.month_spent),
            ("Spent over 6 months", report.total_spent),
        ]):
            card = ctk.CTkFrame(self._summary_frame, fg_color=("gray90", "gray20"), corner_radius=10)
            card.grid(row=0, column=i, padx=6, sticky="ew")
            ctk.CTkLabel(card, text=label, text_color="gray60").pack(pady=(10, 0), padx=16)
            ctk.CTkLabel(
                card, text=format_currency(value),
                font=ctk.CTkFont(size=18, weight="bold"),
                text_color="#F44336",
            ).pack(pady=(4, 10), padx=16)

        self.after(50, self._redraw)

    def _redraw(self):
        if self._report is None:
            return
        bg, fg = self._colors()

        width, height = prepare_canvas(self._bar_fig, self._bar_ax, bg)
        bars = layout_bar_chart(self._report.category_spendings, width, height)
        draw_bar_chart(self._bar_ax, bars, fg)
        self._bar_mpl.draw_idle()

        width, height = prepare_canvas(self._line_fig, self._line_ax, bg)
        points = layout_line_chart(self._report.monthly_spendings, width, height)
        draw_line_chart(self._line_ax, points, fg)
        self._line_mpl.draw_idle()

    def _colors(self) -> tuple[str, str]:
        if ctk.get_appearance_mode() == "Dark":
            return "#2b2b2b", "#dddddd"
        return "white", "black"
