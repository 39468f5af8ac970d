"""
Infrastructure layer of bartnd: the array engine, dimension remapping and
the BART boundary (file formats, marshalling, process driver).
"""
