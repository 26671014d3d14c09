"""
Contratos genéricos del core.

- `FileSource`: cualquier archivo legible de forma asíncrona (UploadFile, archivo local).
- `CompletionService`: servicio externo que recibe instrucción + partes y devuelve texto.
"""
