from escposkit.resources.command_table import load_table_data

__all__ = ["load_table_data"]
