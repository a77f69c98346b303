EGA_FILE_SUFFIX = ".ega"
