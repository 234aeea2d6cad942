import ttkbootstrap as ttk
import tkinter as tk
from tkinter import messagebox
from ttkbootstrap.constants import *
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from fc_utils import FlashcardManager, ValidationError
from stats_utils import build_update_figure
from storage_utils import FlashcardStorage

APP_TITLE = "Smart Flashcard Manager"


class FlashcardGUI:
    def __init__(self, manager: FlashcardManager, storage: FlashcardStorage, themename="minty"):
        self.manager = manager
        self.storage = storage
        self._chart_canvas = None

        # Themed Window
        self.root = ttk.Window(title=APP_TITLE, themename=themename)
        self.root.geometry("800x600")

        # storage messages go to dialogs once a window exists
        self.storage.reporter = self.show_message

        # Input Panel
        input_frame = ttk.Labelframe(self.root, text="New Flashcard", padding=15)
        input_frame.pack(side="top", fill="x", padx=15, pady=(15, 5))
        input_frame.columnconfigure(1, weight=1)

        ttk.Label(input_frame, text="Question:").grid(row=0, column=0, sticky="w", padx=(0, 10), pady=5)
        self.question_entry = ttk.Entry(input_frame, bootstyle="info")
        self.question_entry.grid(row=0, column=1, sticky="ew", pady=5)

        ttk.Label(input_frame, text="Answer:").grid(row=1, column=0, sticky="nw", padx=(0, 10), pady=5)
        self.answer_text = tk.Text(input_frame, height=3, wrap="word")
        self.answer_text.grid(row=1, column=1, sticky="ew", pady=5)

        self.error_label = ttk.Label(input_frame, text="", bootstyle="danger")
        self.error_label.grid(row=2, column=1, sticky="w")

        ttk.Button(input_frame, text="Add Flashcard", bootstyle=SUCCESS,
                   command=self.add_flashcard).grid(row=3, column=1, sticky="w", pady=(5, 0))

        # Flashcard List
        list_frame = ttk.Frame(self.root)
        list_frame.pack(side="top", fill="both", expand=True, padx=15, pady=5)

        self.flashcard_list = tk.Listbox(
            list_frame,
            selectmode="browse",
            exportselection=False,
            bg="white",
            borderwidth=1,
            relief="solid",
            font=("Helvetica", 12)
        )
        self.flashcard_list.pack(side="left", fill="both", expand=True)
        self.flashcard_list.bind("<Double-Button-1>", lambda e: self.edit_flashcard())
        self.flashcard_list.bind("<Button-3>", self._on_right_click)

        scrollbar = ttk.Scrollbar(list_frame, orient="vertical", command=self.flashcard_list.yview)
        scrollbar.pack(side="right", fill="y")
        self.flashcard_list.configure(yscrollcommand=scrollbar.set)

        self.context_menu = tk.Menu(self.root, tearoff=0)
        self.context_menu.add_command(label="Edit", command=self.edit_flashcard)
        self.context_menu.add_command(label="Delete", command=self.delete_flashcard)

        # Buttons
        button_frame = ttk.Frame(self.root)
        button_frame.pack(side="top", pady=5)

        ttk.Button(button_frame, text="Edit Flashcard", bootstyle=PRIMARY,
                   command=self.edit_flashcard).pack(side="left", padx=5)
        ttk.Button(button_frame, text="Delete Flashcard", bootstyle=DANGER,
                   command=self.delete_flashcard).pack(side="left", padx=5)

        # Progress Chart
        self.chart_frame = ttk.Frame(self.root, padding=10)
        self.chart_frame.pack(side="bottom", fill="both", expand=True, padx=15, pady=(5, 15))

        self._refresh()

    # Messages
    def show_message(self, level, message):
        if level == "info":
            messagebox.showinfo(APP_TITLE, message, parent=self.root)
        elif level == "warning":
            messagebox.showwarning(APP_TITLE, message, parent=self.root)
        else:
            messagebox.showerror(APP_TITLE, message, parent=self.root)

    # Flashcard Methods
    def add_flashcard(self):
        self.error_label.config(text="")
        question = self.question_entry.get().strip()
        answer = self.answer_text.get("1.0", "end").strip()

        if not question or not answer:
            self.error_label.config(text="Both question and answer are required")
            return

        try:
            self.manager.create(question, answer)
        except ValidationError as e:
            self.error_label.config(text=f"Error adding flashcard: {e}")
            return

        self.question_entry.delete(0, "end")
        self.answer_text.delete("1.0", "end")
        self._save_and_refresh()

    def delete_flashcard(self):
        card = self._selected_card()
        if card is None:
            messagebox.showwarning("Warning", "Please select a flashcard first.", parent=self.root)
            return
        self.manager.delete(card)
        self._save_and_refresh()

    def edit_flashcard(self):
        card = self._selected_card()
        if card is None:
            messagebox.showwarning("Warning", "Please select a flashcard first.", parent=self.root)
            return
        self._show_edit_dialog(card)

    def _show_edit_dialog(self, card):
        popup = ttk.Toplevel(self.root)
        popup.title("Edit Flashcard")
        popup.transient(self.root)

        grid = ttk.Frame(popup, padding=20)
        grid.pack(fill="both", expand=True)
        grid.columnconfigure(1, weight=1)

        ttk.Label(grid, text="Question:").grid(row=0, column=0, sticky="w", padx=(0, 10), pady=5)
        question_entry = ttk.Entry(grid, width=50)
        question_entry.insert(0, card.question)
        question_entry.grid(row=0, column=1, sticky="ew", pady=5)

        ttk.Label(grid, text="Answer:").grid(row=1, column=0, sticky="nw", padx=(0, 10), pady=5)
        answer_text = tk.Text(grid, height=3, width=50, wrap="word")
        answer_text.insert("1.0", card.answer)
        answer_text.grid(row=1, column=1, sticky="ew", pady=5)

        def save():
            try:
                self.manager.update(card, question_entry.get(), answer_text.get("1.0", "end"))
            except ValidationError as e:
                messagebox.showerror("Edit Flashcard", str(e), parent=popup)
                return
            popup.destroy()
            self._save_and_refresh()

        buttons = ttk.Frame(grid)
        buttons.grid(row=2, column=1, sticky="e", pady=(10, 0))
        ttk.Button(buttons, text="Save", bootstyle=SUCCESS, command=save).pack(side="left", padx=5)
        ttk.Button(buttons, text="Cancel", bootstyle=SECONDARY, command=popup.destroy).pack(side="left", padx=5)

        # grab fails on X11 until the window is mapped
        popup.wait_visibility()
        popup.grab_set()
        question_entry.focus_set()

    # Update UI
    def _save_and_refresh(self):
        self.storage.save(self.manager)
        self._refresh()

    def _refresh(self):
        self._update_flashcard_list()
        self._update_chart()

    def _update_flashcard_list(self):
        self.flashcard_list.delete(0, "end")
        for card in self.manager:
            self.flashcard_list.insert("end", f"{card.question}  |  {card.answer}")

    def _update_chart(self):
        if self._chart_canvas is not None:
            self._chart_canvas.get_tk_widget().destroy()
        fig = build_update_figure(self.manager)
        self._chart_canvas = FigureCanvasTkAgg(fig, master=self.chart_frame)
        self._chart_canvas.draw()
        self._chart_canvas.get_tk_widget().pack(fill="both", expand=True)

    def _selected_card(self):
        selection = self.flashcard_list.curselection()
        if not selection:
            return None
        index = selection[0]
        cards = self.manager.flashcards
        if index >= len(cards):
            return None
        return cards[index]

    # Event Handlers
    def _on_right_click(self, event):
        index = self.flashcard_list.nearest(event.y)
        if index < 0:
            return
        self.flashcard_list.selection_clear(0, "end")
        self.flashcard_list.selection_set(index)
        try:
            self.context_menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.context_menu.grab_release()

    # Main Loop
    def run(self):
        self.root.mainloop()
