import logging
from datetime import date, timedelta

import tkinter as tk
from tkinter import messagebox, ttk

from PIL import Image, ImageTk

from edutrack.constants import (
    APP_NAME,
    APP_SUBTITLE,
    APP_VERSION,
    LOGO_FILE,
    DEMO_EMAIL,
    DEMO_PASSWORD,
    LOGIN_DELAY_MS,
    PRESENT,
    ABSENT,
    WINDOW_WIDTH,
    WINDOW_HEIGHT,
    TITLE_FONT,
    CARD_FONT,
    COLOR_PRIMARY,
    COLOR_TEXT,
    COLOR_MUTED,
    COLOR_PANEL,
    COLOR_SUCCESS,
    COLOR_WARNING,
    COLOR_DANGER,
)
from edutrack.storage import create_folders
from edutrack.logic import (
    get_students,
    add_student,
    sort_students,
    next_roll_no,
    get_attendance_for_date,
    get_attendance_data,
    toggle_status,
    day_counts,
    submit_attendance,
    format_date,
    format_display_date,
    parse_date,
)
from edutrack.reports import build_report, day_details, performance_color
from edutrack.charts import render_trend_chart

logger = logging.getLogger(__name__)

BUTTON_STYLE = {"font": ("Arial", 11), "relief": "raised", "bd": 1, "padx": 8, "pady": 3}


def load_logo(size):
    try:
        return ImageTk.PhotoImage(Image.open(LOGO_FILE).resize(size))
    except FileNotFoundError:
        return None
    except OSError:
        logger.warning("Could not read logo %s", LOGO_FILE)
        return None


def make_card(parent, title, column, color=COLOR_TEXT):
    card = tk.Frame(parent, bg=COLOR_PANEL, padx=15, pady=8)
    card.grid(row=0, column=column, padx=8, sticky="nsew")
    tk.Label(card, text=title, font=("Arial", 10), fg=COLOR_MUTED, bg=COLOR_PANEL).pack()
    value_label = tk.Label(card, text="0", font=CARD_FONT, fg=color, bg=COLOR_PANEL)
    value_label.pack()
    return value_label


class LoginView(tk.Frame):
    def __init__(self, master, on_login):
        super().__init__(master, bg="white")
        self.on_login = on_login

        self.logo = load_logo((100, 100))
        if self.logo:
            tk.Label(self, image=self.logo, bg="white").pack(pady=(40, 5))

        tk.Label(self, text=APP_NAME, font=("Arial", 24, "bold"),
                 fg=COLOR_PRIMARY, bg="white").pack(pady=(40 if not self.logo else 5, 0))
        tk.Label(self, text=APP_SUBTITLE, font=("Arial", 12, "italic"),
                 fg=COLOR_WARNING, bg="white").pack()

        form = tk.Frame(self, bg="white")
        form.pack(pady=25)

        tk.Label(form, text="Welcome Back", font=("Arial", 16, "bold"),
                 fg=COLOR_TEXT, bg="white").grid(row=0, column=0, columnspan=2, pady=8)

        tk.Label(form, text="Email Address:", font=("Arial", 12),
                 fg=COLOR_TEXT, bg="white").grid(row=1, column=0, padx=3, pady=3, sticky="e")
        email_entry = tk.Entry(form, font=("Arial", 11), width=24, bg=COLOR_PANEL)
        email_entry.insert(0, DEMO_EMAIL)
        email_entry.config(state="disabled")
        email_entry.grid(row=1, column=1, padx=3, pady=3)

        tk.Label(form, text="Password:", font=("Arial", 12),
                 fg=COLOR_TEXT, bg="white").grid(row=2, column=0, padx=3, pady=3, sticky="e")
        password_entry = tk.Entry(form, font=("Arial", 11), width=24, bg=COLOR_PANEL, show="*")
        password_entry.insert(0, DEMO_PASSWORD)
        password_entry.config(state="disabled")
        password_entry.grid(row=2, column=1, padx=3, pady=3)

        tk.Label(form, text="Demo credentials are pre-filled for testing",
                 font=("Arial", 10), fg=COLOR_PRIMARY, bg="white").grid(row=3, column=0, columnspan=2, pady=8)

        self.sign_in_btn = tk.Button(
            form, text="Sign In", **BUTTON_STYLE,
            command=self.sign_in, bg=COLOR_PRIMARY, fg="white", width=20
        )
        self.sign_in_btn.grid(row=4, column=0, columnspan=2, pady=8)

        tk.Label(self, text=f"© {date.today().year} {APP_NAME} v{APP_VERSION}. All rights reserved.",
                 font=("Arial", 9), fg=COLOR_MUTED, bg="white").pack(side="bottom", pady=10)

    def sign_in(self):
        self.sign_in_btn.config(text="Signing in...", state="disabled")
        self.after(LOGIN_DELAY_MS, self.on_login)


class DashboardView(tk.Frame):
    def __init__(self, master, app):
        super().__init__(master, bg="white")
        self.app = app
        self.sort_by = "roll_no"
        self.students = []
        self.attendance = {}

        header = tk.Frame(self, bg=COLOR_PRIMARY, pady=10)
        header.pack(fill="x")

        tk.Label(header, text="Attendance Dashboard", font=TITLE_FONT,
                 fg="white", bg=COLOR_PRIMARY).pack()
        self.date_label = tk.Label(header, font=("Arial", 12), fg="white", bg=COLOR_PRIMARY)
        self.date_label.pack()

        nav_frame = tk.Frame(header, bg=COLOR_PRIMARY)
        nav_frame.pack(pady=5)

        tk.Button(nav_frame, text="◀", **BUTTON_STYLE,
                  command=lambda: self.shift_date(-1)).grid(row=0, column=0, padx=3)

        self.date_entry = tk.Entry(nav_frame, font=("Arial", 11), width=12, justify="center")
        self.date_entry.grid(row=0, column=1, padx=3)
        self.date_entry.bind("<Return>", lambda event: self.go_to_entered_date())

        tk.Button(nav_frame, text="Go", **BUTTON_STYLE,
                  command=self.go_to_entered_date).grid(row=0, column=2, padx=3)
        tk.Button(nav_frame, text="▶", **BUTTON_STYLE,
                  command=lambda: self.shift_date(1)).grid(row=0, column=3, padx=3)
        tk.Button(nav_frame, text="Today", **BUTTON_STYLE,
                  command=lambda: self.set_date(date.today())).grid(row=0, column=4, padx=3)
        tk.Button(nav_frame, text="View Reports 📊", **BUTTON_STYLE,
                  command=app.show_reports, bg="#9b59b6", fg="white").grid(row=0, column=5, padx=12)
        tk.Button(nav_frame, text="Logout", **BUTTON_STYLE,
                  command=app.logout, bg=COLOR_DANGER, fg="white").grid(row=0, column=6, padx=3)

        cards = tk.Frame(self, bg="white")
        cards.pack(pady=10)
        self.total_label = make_card(cards, "Total Students", 0)
        self.present_label = make_card(cards, "Present", 1, COLOR_SUCCESS)
        self.rate_label = make_card(cards, "Attendance Rate", 2, COLOR_PRIMARY)

        buttons_frame = tk.Frame(self, bg="white")
        buttons_frame.pack(pady=5)

        tk.Button(buttons_frame, text="Present ✔", **BUTTON_STYLE,
                  command=lambda: self.mark_selected(True), bg=COLOR_SUCCESS, fg="white").grid(row=0, column=0, padx=3)
        tk.Button(buttons_frame, text="Absent ✘", **BUTTON_STYLE,
                  command=lambda: self.mark_selected(False), bg=COLOR_DANGER, fg="white").grid(row=0, column=1, padx=3)
        self.sort_btn = tk.Button(buttons_frame, text="Sort by Name", **BUTTON_STYLE,
                                  command=self.toggle_sort)
        self.sort_btn.grid(row=0, column=2, padx=3)
        tk.Button(buttons_frame, text="Add Student ➕", **BUTTON_STYLE,
                  command=self.add_student, bg=COLOR_WARNING, fg="white").grid(row=0, column=3, padx=3)
        self.submit_btn = tk.Button(buttons_frame, text="Submit Attendance 📝", **BUTTON_STYLE,
                                    command=self.submit, bg=COLOR_PRIMARY, fg="white")
        self.submit_btn.grid(row=0, column=4, padx=3)

        tree_frame = tk.Frame(self, bg="white")
        tree_frame.pack(fill="both", expand=True, padx=15, pady=10)

        self.tree = ttk.Treeview(tree_frame, columns=("roll_no", "name", "status"),
                                 show="headings", height=12)
        self.tree.heading("roll_no", text="Roll No", anchor="center")
        self.tree.heading("name", text="Student", anchor="center")
        self.tree.heading("status", text="Status", anchor="center")
        self.tree.column("roll_no", width=90, anchor="center")
        self.tree.column("name", width=300, anchor="w")
        self.tree.column("status", width=120, anchor="center")
        self.tree.tag_configure(PRESENT, foreground=COLOR_SUCCESS)
        self.tree.tag_configure(ABSENT, foreground=COLOR_DANGER)
        self.tree.tag_configure("unmarked", foreground=COLOR_MUTED)
        self.tree.bind("<Double-Button-1>", lambda event: self.toggle_selected())

        scrollbar = ttk.Scrollbar(tree_frame, orient="vertical", command=self.tree.yview)
        self.tree.configure(yscrollcommand=scrollbar.set)
        self.tree.pack(side="left", fill="both", expand=True)
        scrollbar.pack(side="right", fill="y")

        self.refresh()

    @property
    def date_str(self):
        return format_date(self.app.selected_date)

    def refresh(self):
        self.date_label.config(text=format_display_date(self.app.selected_date))
        self.date_entry.delete(0, tk.END)
        self.date_entry.insert(0, self.date_str)

        self.students = sort_students(get_students(), by=self.sort_by)
        self.attendance = get_attendance_for_date(self.date_str)
        self.update_roster()

    def update_roster(self):
        for item in self.tree.get_children():
            self.tree.delete(item)

        for student in self.students:
            status = self.attendance.get(student.id)
            self.tree.insert(
                "", "end", iid=student.id,
                values=(student.roll_no, student.name, status or "—"),
                tags=(status or "unmarked",)
            )
        self.update_counts()

    def update_counts(self):
        counts = day_counts(self.attendance, self.students)
        self.total_label.config(text=str(counts.total_students))
        self.present_label.config(text=str(counts.present))
        self.rate_label.config(text=f"{counts.rate}%")

    def set_date(self, value):
        self.app.selected_date = value
        self.refresh()

    def shift_date(self, days):
        self.set_date(self.app.selected_date + timedelta(days=days))

    def go_to_entered_date(self):
        value = parse_date(self.date_entry.get())
        if value is None:
            messagebox.showwarning("⚠️ Warning", "Please enter a date as YYYY-MM-DD.")
            return
        self.set_date(value)

    def toggle_sort(self):
        if self.sort_by == "roll_no":
            self.sort_by = "name"
            self.sort_btn.config(text="Sort by Roll No")
        else:
            self.sort_by = "roll_no"
            self.sort_btn.config(text="Sort by Name")
        self.refresh()

    def set_status(self, student_id, present):
        self.attendance[student_id] = toggle_status(student_id, self.date_str, present)
        self.tree.item(student_id, tags=(self.attendance[student_id],))
        self.tree.set(student_id, "status", self.attendance[student_id])
        self.update_counts()

    def mark_selected(self, present):
        selection = self.tree.selection()
        if not selection:
            messagebox.showwarning("⚠️ Warning", "Please select a student first.")
            return
        for student_id in selection:
            self.set_status(student_id, present)

    def toggle_selected(self):
        for student_id in self.tree.selection():
            self.set_status(student_id, self.attendance.get(student_id) != PRESENT)

    def submit(self):
        ok, message, _ = submit_attendance(self.date_str, self.students)
        if not ok:
            messagebox.showwarning("⚠️ Warning", message)
            return
        messagebox.showinfo("✅ Success", message)
        self.refresh()

    def add_student(self):
        add_window = tk.Toplevel(self)
        add_window.title("Add New Student")
        add_window.geometry("360x170")
        add_window.configure(bg="white")
        add_window.transient(self.winfo_toplevel())
        add_window.grab_set()

        tk.Label(add_window, text="Full name:", font=("Arial", 12),
                 fg=COLOR_TEXT, bg="white").grid(row=0, column=0, padx=3, pady=6, sticky="e")
        name_entry = tk.Entry(add_window, font=("Arial", 11), bg=COLOR_PANEL)
        name_entry.grid(row=0, column=1, padx=3, pady=6)

        tk.Label(add_window, text="Roll No:", font=("Arial", 12),
                 fg=COLOR_TEXT, bg="white").grid(row=1, column=0, padx=3, pady=6, sticky="e")
        roll_entry = tk.Entry(add_window, font=("Arial", 11), bg=COLOR_PANEL)
        roll_entry.grid(row=1, column=1, padx=3, pady=6)

        tk.Label(add_window, text=f"Leave empty to use {next_roll_no(self.students)}",
                 font=("Arial", 9), fg=COLOR_MUTED, bg="white").grid(row=2, column=1, sticky="w")

        def save_student():
            ok, message, _ = add_student(name_entry.get(), roll_entry.get())
            if not ok:
                messagebox.showwarning("⚠️ Warning", message, parent=add_window)
                return
            messagebox.showinfo("✅ Success", message, parent=add_window)
            add_window.destroy()
            self.refresh()

        btn_frame = tk.Frame(add_window, bg="white")
        btn_frame.grid(row=3, column=0, columnspan=2, pady=12)

        tk.Button(btn_frame, text="Save", font=("Arial", 11),
                  command=save_student, bg=COLOR_SUCCESS, fg="white",
                  relief="raised", bd=1).pack(side="left", padx=8)
        tk.Button(btn_frame, text="Cancel", font=("Arial", 11),
                  command=add_window.destroy, bg=COLOR_DANGER, fg="white",
                  relief="raised", bd=1).pack(side="left", padx=8)

        name_entry.bind("<Return>", lambda event: save_student())
        name_entry.focus_set()


class ReportsView(tk.Frame):
    def __init__(self, master, app):
        super().__init__(master, bg="white")
        self.app = app
        self.chart_image = None

        header = tk.Frame(self, bg=COLOR_PRIMARY, pady=10)
        header.pack(fill="x")

        tk.Button(header, text="◀ Back", **BUTTON_STYLE,
                  command=app.show_dashboard).pack(side="left", padx=10)
        tk.Button(header, text="Logout", **BUTTON_STYLE,
                  command=app.logout, bg=COLOR_DANGER, fg="white").pack(side="right", padx=10)
        tk.Label(header, text="Attendance Reports", font=TITLE_FONT,
                 fg="white", bg=COLOR_PRIMARY).pack()
        tk.Label(header, text="Overview and analytics", font=("Arial", 11),
                 fg="white", bg=COLOR_PRIMARY).pack()

        self.cards = tk.Frame(self, bg="white")
        self.cards.pack(pady=8)
        self.days_label = make_card(self.cards, "Total Days Tracked", 0)
        self.average_label = make_card(self.cards, "Average Attendance", 1, COLOR_SUCCESS)
        self.students_label = make_card(self.cards, "Students Tracked", 2)

        self.empty_label = tk.Label(
            self, text="No attendance data available yet. Start marking attendance to see reports.",
            font=("Arial", 11), fg=COLOR_WARNING, bg="white"
        )

        notebook = ttk.Notebook(self)
        notebook.pack(fill="both", expand=True, padx=15, pady=8)

        performance_frame = tk.Frame(notebook, bg="white")
        trend_frame = tk.Frame(notebook, bg="white")
        notebook.add(performance_frame, text="Student Performance")
        notebook.add(trend_frame, text="Daily Trend")

        columns = ("roll_no", "name", "present", "total", "percentage", "performance")
        headings = ("Roll No", "Student", "Days Present", "Total Days", "Attendance %", "Performance")
        self.table = ttk.Treeview(performance_frame, columns=columns, show="headings", height=10)
        for column, heading in zip(columns, headings):
            self.table.heading(column, text=heading, anchor="center")
            self.table.column(column, width=110, anchor="center")
        self.table.column("name", width=220, anchor="w")
        for color in (COLOR_SUCCESS, COLOR_WARNING, COLOR_DANGER):
            self.table.tag_configure(color, foreground=color)

        table_scrollbar = ttk.Scrollbar(performance_frame, orient="vertical", command=self.table.yview)
        self.table.configure(yscrollcommand=table_scrollbar.set)
        self.table.pack(side="left", fill="both", expand=True)
        table_scrollbar.pack(side="right", fill="y")

        self.chart_label = tk.Label(trend_frame, bg="white")
        self.chart_label.pack(pady=5)

        drill_frame = tk.Frame(trend_frame, bg="white")
        drill_frame.pack(fill="x", padx=5)
        tk.Label(drill_frame, text="Day details:", font=("Arial", 11),
                 fg=COLOR_TEXT, bg="white").pack(side="left", padx=3)
        self.day_var = tk.StringVar()
        self.day_dropdown = ttk.Combobox(drill_frame, textvariable=self.day_var,
                                         state="readonly", width=14)
        self.day_dropdown.pack(side="left", padx=3)
        self.day_dropdown.bind("<<ComboboxSelected>>", lambda event: self.show_day())
        self.day_summary_label = tk.Label(drill_frame, font=("Arial", 10), fg=COLOR_MUTED, bg="white")
        self.day_summary_label.pack(side="left", padx=8)

        self.day_tree = ttk.Treeview(trend_frame, columns=("roll_no", "name", "status"),
                                     show="headings", height=6)
        self.day_tree.heading("roll_no", text="Roll No", anchor="center")
        self.day_tree.heading("name", text="Student", anchor="center")
        self.day_tree.heading("status", text="Status", anchor="center")
        self.day_tree.column("roll_no", width=90, anchor="center")
        self.day_tree.column("name", width=300, anchor="w")
        self.day_tree.column("status", width=120, anchor="center")
        self.day_tree.tag_configure(PRESENT, foreground=COLOR_SUCCESS)
        self.day_tree.tag_configure(ABSENT, foreground=COLOR_DANGER)
        self.day_tree.pack(fill="both", expand=True, padx=5, pady=5)

        self.trend = []
        self.refresh()

    def refresh(self):
        report = build_report()

        self.days_label.config(text=str(report.tracked_days))
        self.average_label.config(text=f"{report.average_attendance}%")
        self.students_label.config(text=str(report.student_count))

        if report.is_empty:
            self.empty_label.pack(after=self.cards, pady=3)
        else:
            self.empty_label.pack_forget()

        for item in self.table.get_children():
            self.table.delete(item)
        for row in report.table.itertuples(index=False):
            self.table.insert(
                "", "end",
                values=(row.roll_no, row.name, row.present, row.total, f"{row.percentage}%", row.performance),
                tags=(performance_color(row.percentage),)
            )

        self.trend = report.trend
        self.chart_image = ImageTk.PhotoImage(render_trend_chart(self.trend))
        self.chart_label.config(image=self.chart_image)

        days = [day.date for day in reversed(self.trend)]
        self.day_dropdown.config(values=days)
        selected = format_date(self.app.selected_date)
        self.day_var.set(selected if selected in days else (days[0] if days else ""))
        self.show_day()

    def show_day(self):
        for item in self.day_tree.get_children():
            self.day_tree.delete(item)

        day = self.day_var.get()
        if not day:
            self.day_summary_label.config(text="")
            return

        for summary in self.trend:
            if summary.date == day:
                self.day_summary_label.config(
                    text=f"{summary.present} present, {summary.absent} absent ({summary.rate}%)"
                )
                break

        for name, roll_no, status in day_details(day, get_students(), get_attendance_data()):
            self.day_tree.insert("", "end", values=(roll_no, name, status), tags=(status,))


class AttendanceApp:
    def __init__(self, master):
        self.master = master
        master.title(f"{APP_NAME} - {APP_SUBTITLE}")
        master.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        master.configure(bg="white")
        master.option_add('*Font', 'Arial 10')

        create_folders()

        self.selected_date = date.today()
        self.current_view = None
        self.view = None
        self.show_login()

    def _switch(self, name, view_factory):
        if self.view is not None:
            self.view.destroy()
        self.current_view = name
        self.view = view_factory()
        self.view.pack(fill="both", expand=True)
        logger.debug("Switched to %s view", name)

    def show_login(self):
        self._switch("login", lambda: LoginView(self.master, on_login=self.on_login))

    def on_login(self):
        self.show_dashboard()

    def show_dashboard(self):
        self._switch("dashboard", lambda: DashboardView(self.master, self))

    def show_reports(self):
        self._switch("reports", lambda: ReportsView(self.master, self))

    def logout(self):
        self.show_login()
