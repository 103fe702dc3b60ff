import customtkinter as ctk
from services.notifier import Notice
from utils.constants import SEVERITY_COLORS


class AlertBanner(ctk.CTkFrame):
    """Dismissible colored strip showing one notice.

    Info notices close themselves after auto_dismiss_ms; warnings and errors
    stay until the user closes them.
    """

    def __init__(self, master, notice: Notice, auto_dismiss_ms: int = 5000, **kwargs):
        color = SEVERITY_COLORS.get(notice.severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            self, text=f"{notice.title}: {notice.message}", text_color="white",
            anchor="w", padx=10, pady=6,
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent", hover_color=color,
            text_color="white", command=self.destroy,
        ).grid(row=0, column=1, padx=(0, 4))

        if notice.severity == "info" and auto_dismiss_ms:
            self.after(auto_dismiss_ms, self._dismiss)

    def _dismiss(self):
        if self.winfo_exists():
            self.destroy()
