app_name = "konanrun"
