"""In-memory task list: projects, tasks, deadlines and a console command loop."""

__version__ = "0.1.0"
