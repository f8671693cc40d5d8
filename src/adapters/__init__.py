"""Adaptadores concretos: procesos del sistema y permisos de archivos."""
