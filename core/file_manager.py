"""
Core File Manager
Lecture des documents à comparer et écriture des exports
"""
from pathlib import Path


class FileManagerError(Exception):
    """Exception générique pour les erreurs de FileManager"""
    pass


class FileManager:
    """
    Gestionnaire de fichiers texte.
    Les contenus binaires sont refusés : le diff ne porte que sur du texte.
    """

    def read_file(self, file_path: str) -> str:
        """
        Lit le contenu d'un fichier texte UTF-8.

        Args:
            file_path: Le chemin du fichier à lire

        Returns:
            Le contenu du fichier

        Raises:
            FileManagerError: Si le fichier est absent, illisible ou binaire
        """
        path = Path(file_path)
        if not path.exists():
            raise FileManagerError(f"File not found: {file_path}")
        if not path.is_file():
            raise FileManagerError(f"Not a regular file: {file_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except PermissionError as e:
            raise FileManagerError(f"Permission denied for file: {file_path}") from e
        except UnicodeDecodeError as e:
            raise FileManagerError(f"Binary or non UTF-8 content in file: {file_path}") from e
        except OSError as e:
            raise FileManagerError(f"Error reading file {file_path}: {str(e)}") from e

        if '\0' in content:
            raise FileManagerError(f"Binary content in file: {file_path}")
        return content

    def write_file(self, file_path: str, content: str, *, append: bool = False) -> None:
        """
        Écrit du contenu dans un fichier.

        Args:
            file_path: Le chemin du fichier à écrire
            content: Le contenu à écrire
            append: Ajoute le contenu en fin de fichier au lieu d'écraser

        Raises:
            FileManagerError: Si le fichier ne peut pas être écrit
        """
        try:
            path = Path(file_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            mode = 'a' if append else 'w'

            with open(path, mode, encoding='utf-8') as f:
                f.write(content)

        except PermissionError as e:
            raise FileManagerError(f"Permission denied for file: {file_path}") from e
        except OSError as e:
            raise FileManagerError(f"Error writing file {file_path}: {str(e)}") from e


# Instance globale du gestionnaire de fichiers
file_manager = FileManager()
